# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : cmd_common.py
#   file_relpath : src/docxmlfmt/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by DocXmlFmt CLI commands.

These helpers keep the commands thin: they resolve the effective configuration
(including the environment layer), translate span options into a `TextSpan`,
and read shared state from the Click context.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docxmlfmt.api.selection import span_for_lines, widen_caret
from docxmlfmt.cli.errors import DocxmlfmtConfigError, DocxmlfmtUsageError
from docxmlfmt.config import MutableConfig, MutableFormattingOptions
from docxmlfmt.config.logging import get_logger
from docxmlfmt.constants import ENV_WRAP_COLUMN
from docxmlfmt.core.errors import ConfigError, ContractViolationError
from docxmlfmt.core.text import TextSpan

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    import click

    from docxmlfmt.config import Config
    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 when unset)."""
    obj: Any = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def env_layer(environ: Mapping[str, str] | None = None) -> MutableConfig:
    """Return the config layer contributed by environment variables.

    Only ``DOCXMLFMT_WRAP_COLUMN`` is recognized. It sits just above the built-in
    defaults, so any config file or CLI flag setting the wrap column wins.

    Raises:
        ConfigError: If the variable is set to something other than a
            non-negative integer.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    raw: str | None = env.get(ENV_WRAP_COLUMN)
    if raw is None or not raw.strip():
        return MutableConfig()
    try:
        value: int = int(raw.strip())
    except ValueError:
        value = -1
    if value < 0:
        raise ConfigError(f"expected a non-negative integer, got {raw!r}", source=ENV_WRAP_COLUMN)
    logger.debug("Wrap column %d from %s", value, ENV_WRAP_COLUMN)
    return MutableConfig(
        formatting=MutableFormattingOptions(wrap_column=value),
        config_files=[f"env:{ENV_WRAP_COLUMN}"],
    )


def build_config(
    *,
    config_paths: Sequence[str] = (),
    no_config: bool = False,
    args: Mapping[str, Any] | None = None,
    cwd: Path | None = None,
) -> Config:
    """Resolve the effective configuration for a command.

    Layers, in increasing precedence: defaults, environment, discovered project
    config, explicit ``--config`` files, CLI flags.

    Raises:
        DocxmlfmtConfigError: If any layer is invalid.
    """
    try:
        base: MutableConfig = MutableConfig.from_defaults().merge_with(env_layer())
        merged: MutableConfig = MutableConfig.load_merged(
            cwd=cwd,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
            args=args,
            base=base,
        )
        return merged.freeze()
    except ConfigError as e:
        raise DocxmlfmtConfigError(str(e)) from e


def resolve_span(
    text: str,
    *,
    line_range: tuple[int, int] | None = None,
    offset_range: tuple[int, int] | None = None,
    caret_offset: int | None = None,
) -> TextSpan | None:
    """Translate the span options into a `TextSpan` over ``text``.

    Returns:
        TextSpan | None: The span to format, or None for the whole text.

    Raises:
        DocxmlfmtUsageError: If more than one span option is given, or the
            requested region lies outside ``text``.
    """
    chosen: int = sum(v is not None for v in (line_range, offset_range, caret_offset))
    if chosen > 1:
        raise DocxmlfmtUsageError("--lines, --range and --offset are mutually exclusive.")
    try:
        if line_range is not None:
            return span_for_lines(text, *line_range)
        if offset_range is not None:
            span = TextSpan(*offset_range)
            span.check_within(text)
            return span
        if caret_offset is not None:
            return widen_caret(text, caret_offset)
    except ContractViolationError as e:
        raise DocxmlfmtUsageError(str(e)) from e
    return None
