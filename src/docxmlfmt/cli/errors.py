# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : errors.py
#   file_relpath : src/docxmlfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DocXmlFmt CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console when one is present in
the Click context and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from docxmlfmt.cli.exit_codes import ExitCode


class DocxmlfmtCliError(click.ClickException):
    """Base class for all DocXmlFmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class DocxmlfmtUsageError(DocxmlfmtCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocxmlfmtConfigError(DocxmlfmtCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DocxmlfmtFileNotFoundError(DocxmlfmtCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocxmlfmtEncodingError(DocxmlfmtCliError):
    """Error for text decoding errors (input is not UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR


class DocxmlfmtIOError(DocxmlfmtCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DocxmlfmtPermissionError(DocxmlfmtCliError):
    """Error when a file cannot be read or written for lack of permission."""

    exit_code = ExitCode.PERMISSION_DENIED


class DocxmlfmtPipelineError(DocxmlfmtCliError):
    """Error when the formatting engine rejects its own inputs (internal failure)."""

    exit_code = ExitCode.PIPELINE_ERROR
