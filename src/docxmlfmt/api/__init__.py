# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __init__.py
#   file_relpath : src/docxmlfmt/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for DocXmlFmt.

This module is the stable, typed surface meant for editor integrations and
scripts. It re-exports the engine entry points and value types so callers do not
depend on the internal module layout.

Example:
    Align the continuation lines of every doc comment in a snippet::

        from docxmlfmt.api import FormattingOptions, format_text

        new_text = format_text(source, options=FormattingOptions(use_tabs=True))

    Or compute edits for a selection and apply them yourself::

        from docxmlfmt.api import TextSpan, format_edits

        edits = format_edits(source, TextSpan(10, 42), FormattingOptions())
"""

from __future__ import annotations

from docxmlfmt.api.selection import line_at, span_for_lines, widen_caret
from docxmlfmt.config.model import FormattingOptions
from docxmlfmt.core.errors import (
    ConfigError,
    ContractViolationError,
    DocxmlfmtError,
    FormattingCancelledError,
)
from docxmlfmt.core.formatter import format_edits, format_text
from docxmlfmt.core.indentation import IndentStyle, measure, render
from docxmlfmt.core.locator import DocCommentBlock, LineKind, classify_line, locate
from docxmlfmt.core.text import LineBreak, TextEdit, TextSpan, apply_edits

__all__ = [
    "ConfigError",
    "ContractViolationError",
    "DocCommentBlock",
    "DocxmlfmtError",
    "FormattingCancelledError",
    "FormattingOptions",
    "IndentStyle",
    "LineBreak",
    "LineKind",
    "TextEdit",
    "TextSpan",
    "apply_edits",
    "classify_line",
    "format_edits",
    "format_text",
    "line_at",
    "locate",
    "measure",
    "render",
    "span_for_lines",
    "widen_caret",
]
