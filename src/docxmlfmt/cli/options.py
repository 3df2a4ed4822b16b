# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : options.py
#   file_relpath : src/docxmlfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the DocXmlFmt CLI.

This module centralizes reusable options (verbosity, color, configuration, file
filtering, formatting overrides and span selection) and their resolution
logic, so commands and groups can stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from docxmlfmt.cli.cli_types import IntPairParam
from docxmlfmt.cli.errors import DocxmlfmtUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, ``1`` or ``2`` when verbose.

    Raises:
        DocxmlfmtUsageError: If both verbose and quiet flags are used.
    """
    # They are mutually exclusive
    if verbose_count > 0 and quiet_count > 0:
        raise DocxmlfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


#: Click context settings shared by all commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error output.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def trap_underscored_option(ctx: click.Context, param: click.Parameter, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --wrap_column).

    Runs during option parsing (is_eager=True) so we can show a friendly hint
    instead of the generic "No such option" error.
    """
    name = getattr(param, "name", None)
    src = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return

    bad = param.opts[0] if param.opts else "--?"
    suggestion = bad.replace("_", "-")
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {suggestion}?")


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so Click's parameter source
    tracking does not overlap with the real (hyphenated) option.

    Args:
        *names: One or more underscored long option names to trap,
            e.g. "--wrap_column".

    Returns:
        A decorator compatible with Click's option stacking.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    dest = f"_trap_{names[0].lstrip('-').replace('-', '_')}"

    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config/-c`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore local project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)

    return f


def common_file_filtering_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply file filtering options (``--include`` and ``--exclude``).

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Keep only files matching these glob patterns when walking directories.",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Remove files matching these glob patterns.",
    )(f)
    return f


def common_formatting_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply formatting overrides.

    Adds ``--use-tabs/--use-spaces``, ``--tab-size``, ``--wrap-column`` and ``--marker``.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--use-tabs/--use-spaces",
        "use_tabs",
        default=None,
        help="Render continuation indentation with tabs (then spaces) or spaces only.",
    )(f)
    f = click.option(
        "--tab-size",
        "tab_size",
        type=click.IntRange(min=1),
        default=None,
        help="Width of a tab stop.",
    )(f)
    f = underscored_trap_option("--tab_size")(f)
    f = click.option(
        "--wrap-column",
        "wrap_column",
        type=click.IntRange(min=0),
        default=None,
        help="Reflow doc-comment content to this width (0 disables reflow).",
    )(f)
    f = underscored_trap_option("--wrap_column")(f)
    f = click.option(
        "--marker",
        "marker",
        type=str,
        default=None,
        help="Doc-comment marker (default: '///').",
    )(f)
    return f


def common_span_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply span selection options (``--lines``, ``--range`` and ``--offset``).

    These restrict formatting to the blocks intersecting a region of a single
    input; they are mutually exclusive.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--lines",
        "line_range",
        type=IntPairParam(),
        default=None,
        help="Only format blocks touching lines FIRST:LAST (1-based, inclusive).",
    )(f)
    f = click.option(
        "--range",
        "offset_range",
        type=IntPairParam(),
        default=None,
        help="Only format blocks touching character offsets START:END.",
    )(f)
    f = click.option(
        "--offset",
        "caret_offset",
        type=click.IntRange(min=0),
        default=None,
        help="Only format the block around this caret offset.",
    )(f)
    return f
