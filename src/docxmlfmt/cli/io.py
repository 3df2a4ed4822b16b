# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : io.py
#   file_relpath : src/docxmlfmt/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading and writing source files for the CLI.

Sources are read and written as raw UTF-8 bytes so line breaks survive exactly
as they are on disk (no universal-newline translation). A leading UTF-8 BOM is
split off before formatting and restored on write, so it never hides the
indentation of the first line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

from docxmlfmt.cli.errors import (
    DocxmlfmtEncodingError,
    DocxmlfmtIOError,
    DocxmlfmtPermissionError,
)
from docxmlfmt.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from docxmlfmt.config.logging import DocxmlfmtLogger

logger: DocxmlfmtLogger = get_logger(__name__)

UTF8_BOM = "\ufeff"


@dataclass(frozen=True)
class SourceText:
    """Decoded source content.

    Attributes:
        text (str): The text handed to the engine (without BOM).
        bom (bool): Whether the original bytes started with a UTF-8 BOM.
    """

    text: str
    bom: bool = False

    @classmethod
    def decode(cls, data: bytes, *, name: str) -> SourceText:
        """Decode raw bytes.

        Raises:
            DocxmlfmtEncodingError: If ``data`` is not valid UTF-8.
        """
        try:
            text: str = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DocxmlfmtEncodingError(f"{name}: not valid UTF-8 ({e.reason})") from e
        if text.startswith(UTF8_BOM):
            return cls(text[len(UTF8_BOM) :], bom=True)
        return cls(text)

    def encode(self, text: str | None = None) -> bytes:
        """Encode ``text`` (default: the original text), restoring the BOM."""
        body: str = self.text if text is None else text
        return ((UTF8_BOM if self.bom else "") + body).encode("utf-8")


def read_source(path: Path) -> SourceText:
    """Read and decode a source file.

    Raises:
        DocxmlfmtEncodingError: If the file is not valid UTF-8.
        DocxmlfmtPermissionError: If the file cannot be read for lack of permission.
        DocxmlfmtIOError: On any other I/O error.
    """
    try:
        data: bytes = path.read_bytes()
    except PermissionError as e:
        raise DocxmlfmtPermissionError(f"{path}: permission denied") from e
    except OSError as e:
        raise DocxmlfmtIOError(f"{path}: {e.strerror or e}") from e
    logger.trace("Read %d byte(s) from %s", len(data), path)
    return SourceText.decode(data, name=str(path))


def write_source(path: Path, source: SourceText, text: str) -> None:
    """Write ``text`` back to ``path`` with the encoding details of ``source``.

    Raises:
        DocxmlfmtPermissionError: If the file cannot be written for lack of permission.
        DocxmlfmtIOError: On any other I/O error.
    """
    try:
        path.write_bytes(source.encode(text))
    except PermissionError as e:
        raise DocxmlfmtPermissionError(f"{path}: permission denied") from e
    except OSError as e:
        raise DocxmlfmtIOError(f"{path}: {e.strerror or e}") from e
    logger.debug("Wrote %s", path)


def read_stdin_source() -> SourceText:
    """Read a single source's content from STDIN."""
    data: bytes = click.get_binary_stream("stdin").read()
    return SourceText.decode(data, name="<stdin>")


def write_stdout_source(source: SourceText, text: str) -> None:
    """Write formatted content to STDOUT without newline translation."""
    stream = click.get_binary_stream("stdout")
    stream.write(source.encode(text))
    stream.flush()
