# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O: parsing, ``[tool.docxmlfmt]`` extraction, discovery and rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docxmlfmt.config.io import (
    discover_config_files,
    extract_tool_section,
    load_config_source,
    load_toml_dict,
    parse_toml_text,
    to_toml,
)
from docxmlfmt.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_parse_invalid_toml_raises_config_error() -> None:
    """Malformed TOML is reported as a configuration error."""
    with pytest.raises(ConfigError) as excinfo:
        parse_toml_text("[formatting\n", source="x.toml")
    assert str(excinfo.value).startswith("x.toml: invalid TOML")


def test_load_missing_file_raises_config_error(tmp_path: Path) -> None:
    """Unreadable files are configuration errors, not OSErrors."""
    with pytest.raises(ConfigError):
        load_toml_dict(tmp_path / "missing.toml")


def test_extract_tool_section() -> None:
    """Only a table at ``tool.docxmlfmt`` counts."""
    assert extract_tool_section({"tool": {"docxmlfmt": {"a": 1}}}) == {"a": 1}
    assert extract_tool_section({"tool": {"other": {}}}) is None
    assert extract_tool_section({"tool": {"docxmlfmt": 3}}) is None
    assert extract_tool_section({}) is None


def test_load_config_source_unwraps_pyproject(tmp_path: Path) -> None:
    """``pyproject.toml`` contributes its tool table; other files are used whole."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "x"\n\n[tool.docxmlfmt.formatting]\ntab_size = 2\n', encoding="utf-8"
    )
    assert load_config_source(pyproject) == {"formatting": {"tab_size": 2}}


def test_discovery_walks_up_to_the_nearest_project(tmp_path: Path) -> None:
    """The nearest configured directory wins; pyproject comes before docxmlfmt.toml."""
    root = tmp_path / "repo"
    nested = root / "src" / "pkg"
    nested.mkdir(parents=True)
    (root / "pyproject.toml").write_text("[tool.docxmlfmt]\n", encoding="utf-8")
    (root / "docxmlfmt.toml").write_text("", encoding="utf-8")

    found = discover_config_files(nested)
    assert found == [root.resolve() / "pyproject.toml", root.resolve() / "docxmlfmt.toml"]


def test_discovery_ignores_unconfigured_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without ``[tool.docxmlfmt]`` does not stop the walk."""
    root = tmp_path / "repo"
    inner = root / "inner"
    inner.mkdir(parents=True)
    (inner / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    (root / "docxmlfmt.toml").write_text("", encoding="utf-8")

    assert discover_config_files(inner) == [root.resolve() / "docxmlfmt.toml"]


def test_to_toml_drops_none() -> None:
    """TOML has no null, so ``None`` values are omitted."""
    text = to_toml({"formatting": {"tab_size": 4, "wrap_column": None}})
    assert "tab_size = 4" in text
    assert "wrap_column" not in text
