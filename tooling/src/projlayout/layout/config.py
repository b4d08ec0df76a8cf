"""Custom layout file loading (proj.layout properties or YAML)."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from pathlib import Path

import yaml

from projlayout.errors import ConfigurationError
from projlayout.layout.custom import CustomLayout, build_layout

log = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")

# key ends at the first '=', ':' or whitespace run
_SEPARATOR = re.compile(r"\s*[=:]\s*|\s+")


def _continues(line: str) -> bool:
    """True if line ends in an odd number of backslashes."""
    return (len(line) - len(line.rstrip("\\"))) % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    """Join backslash-continued lines; skip blank and comment (# or !) lines."""
    pending: str | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if pending is None:
            if not line or line[0] in "#!":
                continue
            pending = ""
        if _continues(line):
            pending += line[:-1]
            continue
        yield pending + line
        pending = None
    if pending:
        yield pending


def _parse_properties(text: str) -> dict[str, str]:
    """Parse java.util.Properties style lines: key=value, key: value or key value."""
    out: dict[str, str] = {}
    for line in _logical_lines(text):
        m = _SEPARATOR.search(line)
        if m is None:
            out[line] = ""
        else:
            out[line[: m.start()]] = line[m.end() :]
    return out


def _parse_yaml(text: str, path: Path) -> dict[str, str]:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise ConfigurationError(msg, path=path) from e
    if not isinstance(data, dict):
        msg = f"Expected a mapping at top level of {path}"
        raise ConfigurationError(msg, path=path)
    return {str(k): str(v) for k, v in data.items() if v is not None}


def load_layout_config(path: Path) -> dict[str, str]:
    """Read a layout file into a flat dict. YAML for .yaml/.yml, properties otherwise."""
    try:
        text = path.read_text()
    except OSError as e:
        msg = f"Cannot read project layout file {path}: {e}"
        raise ConfigurationError(msg, path=path) from e
    if path.suffix in YAML_SUFFIXES:
        data = _parse_yaml(text, path)
    else:
        data = _parse_properties(text)
    log.debug("Loaded %d layout settings from %s", len(data), path)
    return data


def load_layout_file(path: Path) -> CustomLayout:
    """Build a CustomLayout from a layout file. Raises ConfigurationError on missing keys."""
    try:
        return build_layout(load_layout_config(path))
    except ConfigurationError as e:
        if e.path is None:
            raise ConfigurationError(f"{path}: {e}", key=e.key, path=path) from e
        raise
