# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : version.py
#   file_relpath : src/docxmlfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt `version` command.

Prints the current DocXmlFmt version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docxmlfmt.cli.cmd_common import get_effective_verbosity
from docxmlfmt.constants import DOCXMLFMT_VERSION

if TYPE_CHECKING:
    from docxmlfmt.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DocXmlFmt.",
)
def version_command() -> None:
    """Show the current version of DocXmlFmt."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DocXmlFmt version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DOCXMLFMT_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCXMLFMT_VERSION, bold=True))
