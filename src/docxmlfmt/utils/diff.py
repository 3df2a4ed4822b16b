# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : diff.py
#   file_relpath : src/docxmlfmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized preview.

`unified_diff` compares an original text with its formatted counterpart and
returns the patch as text; `render_patch` colorizes a patch for terminal output.
Neither function prints.
"""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from yachalk import chalk

from docxmlfmt.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)


def unified_diff(original: str, updated: str, name: str) -> str:
    """Return a unified diff between ``original`` and ``updated`` (empty if equal).

    Line endings are kept as they are in the inputs; no CRLF conversion happens.

    Args:
        original (str): Text before formatting.
        updated (str): Text after formatting.
        name (str): Display name used in the ``---``/``+++`` headers.

    Returns:
        str: The diff text.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (current)",
            tofile=f"{name} (updated)",
            n=3,
        )
    )
    # A last line without a break would glue onto the next diff line.
    return "".join(line if line.endswith("\n") else line + "\n" for line in patch_lines)


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    lines: list[str] = (
        patch.splitlines(keepends=False) if isinstance(patch, str) else list(patch)
    )

    def process_line(line: str) -> str:
        # Show control characters explicitly.
        content = line.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.bold.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
