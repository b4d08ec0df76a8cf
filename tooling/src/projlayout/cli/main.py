"""Main CLI entry point for projlayout."""

import logging
import sys

from projlayout.cli import layout_cmd


def _usage() -> None:
    print("Usage: projlayout [-v|--verbose] <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print("  show   - Print source/resource/lib/asset/target/conf/routes roots", file=sys.stderr)
    print(
        "  probe  - Check whether a directory is an app base under a layout",
        file=sys.stderr,
    )


def main() -> None:
    """Main CLI entry point."""
    args = sys.argv[1:]
    verbose = bool(args) and args[0] in ("-v", "--verbose")
    if verbose:
        args = args[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
    if not args:
        _usage()
        sys.exit(2)

    command = args[0]
    if command == "show":
        sys.exit(layout_cmd.run_show_argv(args[1:]))
    elif command == "probe":
        sys.exit(layout_cmd.run_probe_argv(args[1:]))
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        _usage()
        sys.exit(2)


if __name__ == "__main__":
    main()
