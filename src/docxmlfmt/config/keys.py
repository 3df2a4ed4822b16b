# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : keys.py
#   file_relpath : src/docxmlfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DocXmlFmt configuration.

These constants are the external configuration schema as it appears in
``docxmlfmt.toml`` and in ``[tool.docxmlfmt]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DocXmlFmt configuration.

    Notes:
        - Values must match user-facing TOML keys exactly.
        - CLI option names are defined on the Click commands, not here.
    """

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_USE_TABS: Final[str] = "use_tabs"
    KEY_TAB_SIZE: Final[str] = "tab_size"
    # 0 disables reflow.
    KEY_WRAP_COLUMN: Final[str] = "wrap_column"
    KEY_MARKER: Final[str] = "marker"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE: Final[str] = "include"
    KEY_EXCLUDE: Final[str] = "exclude"
