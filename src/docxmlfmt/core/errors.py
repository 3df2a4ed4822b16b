# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : errors.py
#   file_relpath : src/docxmlfmt/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the DocXmlFmt engine.

The engine is total over well-formed input. Anything outside that domain (a span
outside the text, a non-positive tab size, overlapping edits) is a programming
error and fails fast with `ContractViolationError`. There is no silent clamping.
"""

from __future__ import annotations


class DocxmlfmtError(Exception):
    """Base class for all DocXmlFmt library errors."""


class ContractViolationError(DocxmlfmtError, ValueError):
    """A caller broke a precondition of the engine (invalid span, options or edits)."""


class FormattingCancelledError(DocxmlfmtError):
    """Formatting was cancelled by the caller between two blocks."""


class ConfigError(DocxmlfmtError):
    """Configuration could not be loaded (malformed TOML or wrongly-typed values)."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)


def require(condition: bool, message: str) -> None:
    """Raise `ContractViolationError` with ``message`` unless ``condition`` holds.

    Args:
        condition (bool): The precondition to check.
        message (str): Error message used when the precondition fails.

    Raises:
        ContractViolationError: If ``condition`` is false.
    """
    if not condition:
        raise ContractViolationError(message)
