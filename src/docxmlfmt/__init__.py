# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __init__.py
#   file_relpath : src/docxmlfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt package.

DocXmlFmt reformats documentation comments made of consecutive ``///`` lines.
It aligns continuation lines with the first line of each block and, when a wrap
column is configured, reflows the comment text without splitting markup tags.
It exposes both a CLI and a small typed API for editor integrations.
"""

from __future__ import annotations
