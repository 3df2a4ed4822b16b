# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : io.py
#   file_relpath : src/docxmlfmt/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O for DocXmlFmt configuration.

This module reads and writes configuration documents with `tomlkit`:

* `load_toml_dict` parses a TOML file into plain Python values.
* `extract_tool_section` pulls ``[tool.docxmlfmt]`` out of a ``pyproject.toml``.
* `discover_config_files` walks up from a directory to the nearest project that
  configures DocXmlFmt.
* The ``get_*`` helpers read typed values from a table and raise `ConfigError`
  on type mismatches instead of silently defaulting.
* `to_toml` renders a table back to TOML text (``None`` entries are dropped,
  since TOML has no null).
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docxmlfmt.config.logging import get_logger
from docxmlfmt.constants import DOCXMLFMT_TOML_NAME, PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION
from docxmlfmt.core.errors import ConfigError

if TYPE_CHECKING:
    from docxmlfmt.config.logging import DocxmlfmtLogger

# A parsed TOML table with plain Python values.
TomlTable = dict[str, Any]

logger: DocxmlfmtLogger = get_logger(__name__)


def parse_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain ``dict``.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigError(f"invalid TOML: {e}", source=source) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"cannot read config file: {e}", source=str(path)) from e
    logger.debug("Loaded TOML from %s", path)
    return parse_toml_text(text, source=str(path))


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return the ``[tool.docxmlfmt]`` table of a parsed ``pyproject.toml``, if any."""
    table: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(table, dict):
            return None
        table = cast("TomlTable", table).get(part)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def load_config_source(path: Path) -> TomlTable:
    """Load a config source, unwrapping ``[tool.docxmlfmt]`` for ``pyproject.toml``."""
    data: TomlTable = load_toml_dict(path)
    if path.name == PYPROJECT_TOML_NAME:
        return extract_tool_section(data) or {}
    return data


def discover_config_files(start: Path) -> list[Path]:
    """Find the configuration files of the nearest configured project.

    Walks up from ``start`` and stops at the first directory holding a
    ``docxmlfmt.toml`` or a ``pyproject.toml`` with a ``[tool.docxmlfmt]`` table.

    Args:
        start (Path): Directory to start from (usually the working directory).

    Returns:
        list[Path]: Files in increasing precedence (``pyproject.toml`` first,
            then ``docxmlfmt.toml``); empty when nothing is found.
    """
    for directory in (start.resolve(), *start.resolve().parents):
        found: list[Path] = []
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file() and extract_tool_section(load_toml_dict(pyproject)) is not None:
            found.append(pyproject)
        own: Path = directory / DOCXMLFMT_TOML_NAME
        if own.is_file():
            found.append(own)
        if found:
            logger.debug("Discovered config file(s): %s", ", ".join(str(p) for p in found))
            return found
    return []


# --- typed getters ---


def get_table(data: TomlTable, key: str, *, source: str | None = None) -> TomlTable:
    """Return sub-table ``key`` (empty when missing).

    Raises:
        ConfigError: If ``key`` holds a non-table value.
    """
    value: Any = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"[{key}] must be a table", source=source)
    return cast("TomlTable", value)


def get_bool_or_none(table: TomlTable, key: str, *, source: str | None = None) -> bool | None:
    """Return a boolean value or None when missing.

    Raises:
        ConfigError: If the value is not a boolean.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}", source=source)


def get_int_or_none(table: TomlTable, key: str, *, source: str | None = None) -> int | None:
    """Return an integer value or None when missing.

    Raises:
        ConfigError: If the value is not an integer (booleans are rejected).
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}", source=source)
    return value


def get_str_or_none(table: TomlTable, key: str, *, source: str | None = None) -> str | None:
    """Return a string value or None when missing.

    Raises:
        ConfigError: If the value is not a string.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ConfigError(f"'{key}' must be a string, got {value!r}", source=source)


def get_str_list_or_none(
    table: TomlTable,
    key: str,
    *,
    source: str | None = None,
) -> list[str] | None:
    """Return a list of strings or None when missing.

    Raises:
        ConfigError: If the value is not a list of strings.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings, got {value!r}", source=source)
    return list(cast("list[str]", value))


# --- rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible ``None`` from mappings and lists."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, list):
        items: list[object] = cast("list[object]", value)
        return [_strip_none_for_toml(v) for v in items if v is not None]
    return value


def to_toml(data: TomlTable) -> str:
    """Render a table as TOML text."""
    cleaned: Any = _strip_none_for_toml(data)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
