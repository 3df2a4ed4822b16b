# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : __init__.py
#   file_relpath : src/docxmlfmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doc-comment reformatting engine.

The modules in this package are pure: they take an immutable text snapshot and
immutable options and return an immutable list of text edits. No I/O is performed.

Modules:
    - ``text``: source text model (lines, spans, edits).
    - ``indentation``: column-width arithmetic for tab/space indentation.
    - ``locator``: finds doc-comment blocks intersecting a span.
    - ``normalizer``: aligns continuation lines with a block's first line.
    - ``markup`` / ``reflow``: markup-safe re-wrapping of comment text.
    - ``edits``: minimal edit computation.
    - ``formatter``: the engine entry point tying the passes together.
"""

from __future__ import annotations
