# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : check.py
#   file_relpath : src/docxmlfmt/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocXmlFmt `check` command (dry-run by default, ``--apply`` to write).

Formats the ``///`` doc-comment blocks in the given files. Without ``--apply``
nothing is written and the command exits with code 2 when any file would
change, which makes it suitable for CI.

Input modes supported:
  * **Paths mode (default)**: one or more files, directories or globs.
  * **Content on STDIN**: a single ``-`` as the sole PATH. With ``--apply`` the
    formatted content is written to STDOUT.

Examples:
  Preview which files would change, with a summary:

    $ docxmlfmt check --summary src

  Reflow to 80 columns and write changes in place:

    $ docxmlfmt check --wrap-column 80 --apply src

  Format only the block around lines 10-14 of one file:

    $ docxmlfmt check --lines 10:14 --diff Foo.cs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from docxmlfmt.cli.cmd_common import (
    build_config,
    get_effective_verbosity,
    resolve_span,
)
from docxmlfmt.cli.errors import (
    DocxmlfmtCliError,
    DocxmlfmtFileNotFoundError,
    DocxmlfmtPipelineError,
    DocxmlfmtUsageError,
)
from docxmlfmt.cli.exit_codes import ExitCode
from docxmlfmt.cli.io import (
    read_source,
    read_stdin_source,
    write_source,
    write_stdout_source,
)
from docxmlfmt.cli.options import (
    CONTEXT_SETTINGS,
    common_config_options,
    common_file_filtering_options,
    common_formatting_options,
    common_span_options,
)
from docxmlfmt.config.logging import get_logger
from docxmlfmt.core.errors import ContractViolationError
from docxmlfmt.core.formatter import format_edits
from docxmlfmt.core.text import TextSpan, apply_edits
from docxmlfmt.file_resolver import resolve_file_list
from docxmlfmt.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from pathlib import Path

    from docxmlfmt.cli.console import ConsoleLike
    from docxmlfmt.cli.io import SourceText
    from docxmlfmt.config import Config
    from docxmlfmt.config.logging import DocxmlfmtLogger
    from docxmlfmt.core.text import TextEdit
    from docxmlfmt.file_resolver import ResolvedFiles

logger: DocxmlfmtLogger = get_logger(__name__)

STDIN_NAME = "<stdin>"


@dataclass
class FileOutcome:
    """Result of formatting one input.

    Attributes:
        name (str): Display name (path or ``<stdin>``).
        original (str): Text before formatting.
        updated (str): Text after formatting.
        edit_count (int): Number of edits the engine produced.
        error (DocxmlfmtCliError | None): Failure that prevented formatting.
    """

    name: str
    original: str = ""
    updated: str = ""
    edit_count: int = 0
    error: DocxmlfmtCliError | None = None

    @property
    def changed(self) -> bool:
        """True if formatting changed the text."""
        return self.error is None and self.original != self.updated


def _format_source(
    name: str,
    source: SourceText,
    config: Config,
    span: TextSpan | None,
) -> FileOutcome:
    text: str = source.text
    try:
        edits: list[TextEdit] = format_edits(
            text, span if span is not None else TextSpan.whole(text), config.formatting
        )
    except ContractViolationError as e:
        # Spans were validated up front; anything here is an engine failure.
        return FileOutcome(name=name, original=text, error=DocxmlfmtPipelineError(f"{name}: {e}"))
    return FileOutcome(
        name=name, original=text, updated=apply_edits(text, edits), edit_count=len(edits)
    )


def _report(
    console: ConsoleLike,
    outcome: FileOutcome,
    *,
    apply_changes: bool,
    show_diffs: bool,
    vlevel: int,
) -> None:
    if outcome.error is not None:
        console.error(outcome.error.format_message())
        return
    if outcome.changed:
        verb: str = "reformatted" if apply_changes else "would reformat"
        if vlevel >= 0:
            console.print(
                f"{console.styled(verb, fg='yellow', bold=True)} {outcome.name} "
                f"({outcome.edit_count} edit{'s' if outcome.edit_count != 1 else ''})"
            )
        if show_diffs:
            patch: str = unified_diff(outcome.original, outcome.updated, outcome.name)
            enable_color: bool = bool(getattr(console, "enable_color", False))
            console.print(render_patch(patch) if enable_color else patch, nl=False)
    elif vlevel > 0:
        console.print(f"{console.styled('unchanged', fg='green')} {outcome.name}")


def _render_summary(console: ConsoleLike, outcomes: list[FileOutcome], apply_changes: bool) -> None:
    changed: int = sum(o.changed for o in outcomes)
    failed: int = sum(o.error is not None for o in outcomes)
    unchanged: int = len(outcomes) - changed - failed
    verb: str = "reformatted" if apply_changes else "would be reformatted"
    console.print()
    console.print(console.styled("Summary:", bold=True, underline=True))
    console.print(f"  {changed} file(s) {verb}")
    console.print(f"  {unchanged} file(s) unchanged")
    if failed:
        console.print(console.styled(f"  {failed} file(s) failed", fg="bright_red"))


@click.command(
    name="check",
    help="Format doc-comment blocks (dry-run). Use --apply to write changes.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which files would change (dry-run)
  docxmlfmt check src

  # Apply: reflow to 100 columns in-place
  docxmlfmt check --wrap-column 100 --apply .
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_file_filtering_options
@common_formatting_options
@common_span_options
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Write changes to files (off by default)."
)
@click.option("--diff", "show_diffs", is_flag=True, help="Show unified diffs of the changes.")
@click.option("--summary", "summary_mode", is_flag=True, help="Show outcome counts at the end.")
def check_command(
    *,
    paths: tuple[str, ...],
    config_paths: tuple[str, ...],
    no_config: bool,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    use_tabs: bool | None,
    tab_size: int | None,
    wrap_column: int | None,
    marker: str | None,
    line_range: tuple[int, int] | None,
    offset_range: tuple[int, int] | None,
    caret_offset: int | None,
    apply_changes: bool,
    show_diffs: bool,
    summary_mode: bool,
) -> None:
    """Format doc-comment blocks in the given inputs.

    Args:
        paths: Files, directories or globs; a single ``-`` reads content from STDIN.
        config_paths: Additional TOML config files to merge.
        no_config: If True, skip project config discovery.
        include_patterns: Include glob patterns overriding the config.
        exclude_patterns: Exclude glob patterns overriding the config.
        use_tabs: Override for tab-based indentation.
        tab_size: Override for the tab width.
        wrap_column: Override for the reflow width (0 disables reflow).
        marker: Override for the doc-comment marker.
        line_range: Restrict formatting to blocks touching these lines.
        offset_range: Restrict formatting to blocks touching these offsets.
        caret_offset: Restrict formatting to the block around this offset.
        apply_changes: Write changes (to the files, or STDOUT for ``-``).
        show_diffs: Print unified diffs of the changes.
        summary_mode: Print outcome counts at the end.

    Exit codes:
        0 when nothing would change (or changes were applied), 2 when a dry run
        found changes, and the error's code when any input failed.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

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
    logger.debug("Effective formatting options: %s", config.formatting)

    span_requested: bool = any(v is not None for v in (line_range, offset_range, caret_offset))
    stdin_mode: bool = "-" in paths
    if stdin_mode and len(paths) > 1:
        raise DocxmlfmtUsageError("'-' (content from STDIN) must be the only PATH.")

    outcomes: list[FileOutcome] = []
    if stdin_mode:
        source: SourceText = read_stdin_source()
        span: TextSpan | None = resolve_span(
            source.text,
            line_range=line_range,
            offset_range=offset_range,
            caret_offset=caret_offset,
        )
        outcome: FileOutcome = _format_source(STDIN_NAME, source, config, span)
        outcomes.append(outcome)
        if apply_changes and outcome.error is None:
            # STDOUT carries the content; per-file reporting would corrupt it.
            write_stdout_source(source, outcome.updated)
        else:
            _report(console, outcome, apply_changes=False, show_diffs=show_diffs, vlevel=vlevel)
    else:
        if not paths:
            raise DocxmlfmtUsageError("No PATHS given. Pass files, directories, globs or '-'.")
        resolved: ResolvedFiles = resolve_file_list(paths, config)
        for missing in resolved.missing:
            err = DocxmlfmtFileNotFoundError(f"{missing}: no such file or directory")
            outcomes.append(FileOutcome(name=missing, error=err))
            console.error(err.format_message())
        if span_requested and len(resolved.files) != 1:
            raise DocxmlfmtUsageError("--lines, --range and --offset require exactly one file.")
        if not resolved.files and not resolved.missing:
            if vlevel >= 0:
                console.print(console.styled("No files to process.", fg="yellow"))
            ctx.exit(ExitCode.SUCCESS)

        for path in resolved.files:
            outcome = _process_file(
                path,
                config,
                line_range=line_range,
                offset_range=offset_range,
                caret_offset=caret_offset,
                apply_changes=apply_changes,
            )
            outcomes.append(outcome)
            _report(
                console,
                outcome,
                apply_changes=apply_changes,
                show_diffs=show_diffs,
                vlevel=vlevel,
            )

    if summary_mode and not (stdin_mode and apply_changes):
        _render_summary(console, outcomes, apply_changes and not stdin_mode)

    for outcome in outcomes:
        if outcome.error is not None:
            ctx.exit(outcome.error.exit_code)
    if not apply_changes and any(o.changed for o in outcomes):
        ctx.exit(ExitCode.WOULD_CHANGE)


def _process_file(
    path: Path,
    config: Config,
    *,
    line_range: tuple[int, int] | None,
    offset_range: tuple[int, int] | None,
    caret_offset: int | None,
    apply_changes: bool,
) -> FileOutcome:
    name: str = str(path)
    try:
        source: SourceText = read_source(path)
    except DocxmlfmtCliError as e:
        return FileOutcome(name=name, error=e)
    span: TextSpan | None = resolve_span(
        source.text,
        line_range=line_range,
        offset_range=offset_range,
        caret_offset=caret_offset,
    )
    outcome: FileOutcome = _format_source(name, source, config, span)
    if apply_changes and outcome.changed:
        try:
            write_source(path, source, outcome.updated)
        except DocxmlfmtCliError as e:
            outcome.error = e
    return outcome
