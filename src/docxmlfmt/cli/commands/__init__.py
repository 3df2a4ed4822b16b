# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __init__.py
#   file_relpath : src/docxmlfmt/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt CLI subcommands."""

from __future__ import annotations
