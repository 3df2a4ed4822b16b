# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __init__.py
#   file_relpath : src/docxmlfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for DocXmlFmt."""

from __future__ import annotations
