# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : file_resolver.py
#   file_relpath : src/docxmlfmt/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for DocXmlFmt based on config and positional paths.

Positional arguments may be files, directories or glob patterns:

1. **Files** named explicitly are always candidates.
2. **Directories** are walked recursively; the files found are kept only if they
   match one of the include patterns.
3. **Globs** are expanded relative to the current working directory and treated
   like explicit files.
4. Exclude patterns are then subtracted from the whole candidate set.

Patterns use gitwildmatch semantics (via `pathspec`) and are matched against
paths relative to the workspace root. The result is sorted for deterministic
output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from docxmlfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from docxmlfmt.config import Config
    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)


@dataclass
class ResolvedFiles:
    """Outcome of file resolution.

    Attributes:
        files (list[Path]): Sorted files selected for processing.
        missing (list[str]): Positional paths that did not exist or globs that
            matched nothing.
    """

    files: list[Path] = field(default_factory=lambda: [])
    missing: list[str] = field(default_factory=lambda: [])


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _spec(patterns: Iterable[str]) -> PathSpec | None:
    pats: list[str] = [p for p in patterns if p.strip()]
    return PathSpec.from_lines(GitWildMatchPattern, pats) if pats else None


def resolve_file_list(
    paths: Sequence[str],
    config: Config,
    *,
    workspace_root: Path | None = None,
) -> ResolvedFiles:
    """Return the files to process for the given positional ``paths``.

    Args:
        paths (Sequence[str]): Positional paths (files, directories, globs).
        config (Config): Runtime configuration providing include/exclude patterns.
        workspace_root (Path | None): Base for pattern matching; defaults to CWD.

    Returns:
        ResolvedFiles: Selected files and the paths that could not be resolved.
    """
    root: Path = workspace_root or Path.cwd()
    include: PathSpec | None = _spec(config.include_patterns)
    exclude: PathSpec | None = _spec(config.exclude_patterns)
    result = ResolvedFiles()
    candidates: set[Path] = set()

    for raw in paths:
        p = Path(raw)
        if any(ch in raw for ch in "*?["):
            base: Path = Path(p.anchor) if p.is_absolute() else root
            pattern: str = str(p.relative_to(p.anchor)) if p.is_absolute() else raw
            matches: list[Path] = [m for m in base.glob(pattern) if m.is_file()]
            if not matches:
                logger.warning("No matches for glob pattern: %s", raw)
                result.missing.append(raw)
            candidates.update(matches)
        elif p.is_dir():
            for found in p.rglob("*"):
                if not found.is_file():
                    continue
                if include is None or include.match_file(_rel_for_match(found, root)):
                    candidates.add(found)
        elif p.is_file():
            candidates.add(p)
        else:
            logger.warning("No such file or directory: %s", raw)
            result.missing.append(raw)

    if exclude is not None:
        candidates = {c for c in candidates if not exclude.match_file(_rel_for_match(c, root))}

    result.files = sorted(candidates)
    logger.trace("Files to process: %d -- %s", len(result.files), result.files)
    return result
