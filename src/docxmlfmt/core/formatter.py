# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : formatter.py
#   file_relpath : src/docxmlfmt/core/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Engine entry point: format the doc comments touching a span.

Control flow per call::

    locate(text, span) -> for each block:
        reflow (when a wrap column is set) or normalize -> diff -> edits

The computation is synchronous and pure. Cancellation is advisory and is only
checked between blocks, so every block's edits are produced completely or not
at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docxmlfmt.config.logging import get_logger
from docxmlfmt.config.model import FormattingOptions
from docxmlfmt.core.edits import diff
from docxmlfmt.core.errors import FormattingCancelledError
from docxmlfmt.core.locator import locate
from docxmlfmt.core.normalizer import normalize
from docxmlfmt.core.reflow import reflow
from docxmlfmt.core.text import TextSpan, apply_edits

if TYPE_CHECKING:
    from collections.abc import Callable

    from docxmlfmt.config.logging import DocxmlfmtLogger
    from docxmlfmt.core.locator import DocCommentBlock
    from docxmlfmt.core.text import TextEdit

logger: DocxmlfmtLogger = get_logger(__name__)


def format_block(block: DocCommentBlock, options: FormattingOptions) -> tuple[str, ...]:
    """Return the normalized line texts of one block."""
    if options.wrap_column is not None:
        return reflow(block, options)
    return normalize(block, options)


def format_edits(
    text: str,
    span: TextSpan,
    options: FormattingOptions,
    *,
    should_cancel: Callable[[], bool] | None = None,
) -> list[TextEdit]:
    """Compute the edits normalizing every doc-comment block that touches ``span``.

    Args:
        text (str): Immutable source text snapshot.
        span (TextSpan): Offset range to format; must lie within ``text``.
        options (FormattingOptions): Formatting options.
        should_cancel (Callable[[], bool] | None): Optional cancellation probe, polled
            before each block.

    Returns:
        list[TextEdit]: Non-overlapping edits sorted by start offset, expressed
            against ``text``. Empty when nothing needs to change.

    Raises:
        ContractViolationError: If ``span`` lies outside ``text``.
        FormattingCancelledError: If ``should_cancel`` returned True.
    """
    edits: list[TextEdit] = []
    blocks: int = 0
    for block in locate(text, span, options.marker):
        if should_cancel is not None and should_cancel():
            logger.info("Formatting cancelled after %d block(s)", blocks)
            raise FormattingCancelledError(f"cancelled after {blocks} block(s)")
        blocks += 1
        edits.extend(diff(block, format_block(block, options)))
    logger.debug("Formatted %d block(s), %d edit(s)", blocks, len(edits))
    return edits


def format_text(
    text: str,
    span: TextSpan | None = None,
    options: FormattingOptions | None = None,
) -> str:
    """Return ``text`` with the doc comments touching ``span`` formatted.

    Args:
        text (str): Source text.
        span (TextSpan | None): Offset range to format; the whole text when None.
        options (FormattingOptions | None): Formatting options; defaults when None.

    Returns:
        str: The formatted text.
    """
    effective_span: TextSpan = span if span is not None else TextSpan.whole(text)
    effective_options: FormattingOptions = options if options is not None else FormattingOptions()
    return apply_edits(text, format_edits(text, effective_span, effective_options))
