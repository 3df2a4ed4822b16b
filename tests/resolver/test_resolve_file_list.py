# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : test_resolve_file_list.py
#   file_relpath : tests/resolver/test_resolve_file_list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File resolution: explicit files, directory walks, globs and exclusions."""

from __future__ import annotations

from pathlib import Path

from docxmlfmt.file_resolver import resolve_file_list
from tests.conftest import make_config


def _touch(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("/// x\n", encoding="utf-8")


def test_directory_walk_uses_include_patterns(isolation: Path) -> None:
    """Directories contribute only files matching the include patterns."""
    _touch(isolation, "src/A.cs", "src/sub/B.cs", "src/notes.txt")
    resolved = resolve_file_list(["src"], make_config(), workspace_root=isolation)
    assert resolved.files == [Path("src/A.cs"), Path("src/sub/B.cs")]
    assert resolved.missing == []


def test_explicit_files_bypass_include_patterns(isolation: Path) -> None:
    """A file named on the command line is processed whatever its extension."""
    _touch(isolation, "notes.txt")
    resolved = resolve_file_list(["notes.txt"], make_config(), workspace_root=isolation)
    assert resolved.files == [Path("notes.txt")]


def test_globs_expand_relative_to_the_root(isolation: Path) -> None:
    """Glob patterns are expanded against the workspace root."""
    _touch(isolation, "a/X.cs", "b/Y.cs", "b/Z.vb")
    resolved = resolve_file_list(["*/*.cs"], make_config(), workspace_root=isolation)
    assert resolved.files == [isolation / "a/X.cs", isolation / "b/Y.cs"]


def test_exclude_patterns_are_subtracted(isolation: Path) -> None:
    """Excluded files are removed from every source of candidates."""
    _touch(isolation, "src/A.cs", "src/gen/B.cs", "C.cs")
    config = make_config(exclude_patterns=["gen/", "C.cs"])
    resolved = resolve_file_list(["src", "C.cs"], config, workspace_root=isolation)
    assert resolved.files == [Path("src/A.cs")]


def test_missing_paths_are_reported(isolation: Path) -> None:
    """Nonexistent paths and unmatched globs are listed as missing."""
    resolved = resolve_file_list(["nope.cs", "*.zz"], make_config(), workspace_root=isolation)
    assert resolved.files == []
    assert resolved.missing == ["nope.cs", "*.zz"]
