# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : main.py
#   file_relpath : src/docxmlfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt command line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console and verbosity from there.
Internal logging is configured from the ``DOCXMLFMT_LOG_LEVEL`` environment
variable and is independent from program output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docxmlfmt.cli.commands.check import check_command
from docxmlfmt.cli.commands.dump_config import dump_config_command
from docxmlfmt.cli.commands.version import version_command
from docxmlfmt.cli.console import ClickConsole
from docxmlfmt.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from docxmlfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from docxmlfmt.cli.console import ConsoleLike
    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%s color=%s", ctx.obj["verbosity_level"], enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="DocXmlFmt: normalize and reflow /// XML doc-comment blocks.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DocXmlFmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'docxmlfmt check [PATHS...]' to check doc comments.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(dump_config_command)

cli.add_command(check_command)

if __name__ == "__main__":
    cli()
