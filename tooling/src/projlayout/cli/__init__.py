"""CLI for projlayout. Entry point: projlayout.cli.main:main."""
