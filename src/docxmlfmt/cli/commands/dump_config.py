# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : dump_config.py
#   file_relpath : src/docxmlfmt/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt `dump-config` command.

Emits the effective configuration as TOML after applying defaults, the
environment, project config files, explicit ``--config`` files and CLI
overrides. The output is wrapped between `# === BEGIN ===` and `# === END ===`
markers for easy parsing in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docxmlfmt.cli.cmd_common import build_config, get_effective_verbosity
from docxmlfmt.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_file_filtering_options,
    common_formatting_options,
)
from docxmlfmt.config.io import to_toml
from docxmlfmt.config.logging import get_logger

if TYPE_CHECKING:
    from docxmlfmt.cli.console import ConsoleLike
    from docxmlfmt.config import Config
    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged DocXmlFmt configuration as TOML.",
    epilog=(
        "Notes:\n"
        "  • Formatting and filter flags are applied as the last layer.\n"
        "  • Output is wrapped between '# === BEGIN ===' and '# === END ===' markers."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_file_filtering_options
@common_formatting_options
def dump_config_command(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    use_tabs: bool | None,
    tab_size: int | None,
    wrap_column: int | None,
    marker: str | None,
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        config_paths: Additional TOML config files to merge into the effective config.
        no_config: If True, skip loading project configuration files.
        include_patterns: Include glob patterns overriding the config.
        exclude_patterns: Exclude glob patterns overriding the config.
        use_tabs: Override for tab-based indentation.
        tab_size: Override for the tab width.
        wrap_column: Override for the reflow width (0 disables reflow).
        marker: Override for the doc-comment marker.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        args={
            "use_tabs": use_tabs,
            "tab_size": tab_size,
            "wrap_column": wrap_column,
            "marker": marker,
            "include_patterns": include_patterns,
            "exclude_patterns": exclude_patterns,
        },
    )

    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files or ("<defaults>",):
            console.print(console.styled(f"# source: {source}", dim=True))
    console.print("# === BEGIN ===")
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))
    console.print("# === END ===")
