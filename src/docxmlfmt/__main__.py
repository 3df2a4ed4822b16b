# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __main__.py
#   file_relpath : src/docxmlfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DocXmlFmt via ``python -m docxmlfmt``.

It delegates directly to :func:`docxmlfmt.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how DocXmlFmt is launched.

Examples:
    Check the doc comments of a source tree::

        python -m docxmlfmt check src
"""

from __future__ import annotations

from docxmlfmt.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
