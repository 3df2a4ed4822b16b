# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : constants.py
#   file_relpath : src/docxmlfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCXMLFMT_VERSION: str = get_version("docxmlfmt")

# Configuration file names searched for while walking up from the working directory.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
DOCXMLFMT_TOML_NAME: str = "docxmlfmt.toml"
PYPROJECT_TOOL_SECTION: str = "tool.docxmlfmt"

# Environment variables honored by the CLI layer (never by the engine).
ENV_LOG_LEVEL: str = "DOCXMLFMT_LOG_LEVEL"
ENV_WRAP_COLUMN: str = "DOCXMLFMT_WRAP_COLUMN"

DEFAULT_MARKER: str = "///"
DEFAULT_TAB_SIZE: int = 4
DEFAULT_INCLUDE_PATTERNS: tuple[str, ...] = ("*.cs",)
