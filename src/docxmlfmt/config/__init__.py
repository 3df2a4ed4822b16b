# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __init__.py
#   file_relpath : src/docxmlfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for DocXmlFmt.

Re-exports the configuration model so callers can import it from
``docxmlfmt.config`` directly.
"""

from __future__ import annotations

from docxmlfmt.config.model import (
    ArgsLike,
    Config,
    FormattingOptions,
    MutableConfig,
    MutableFormattingOptions,
)

__all__ = [
    "ArgsLike",
    "Config",
    "FormattingOptions",
    "MutableConfig",
    "MutableFormattingOptions",
]
