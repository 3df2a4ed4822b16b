# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DocXmlFmt test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides small builders shared by the test modules.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `docxmlfmt.config.MutableConfig`, then `freeze()` them. Never
    mutate a frozen `Config`; `thaw()` it, edit, and freeze again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from docxmlfmt.config import FormattingOptions, MutableConfig, logging
from docxmlfmt.constants import ENV_LOG_LEVEL, ENV_WRAP_COLUMN
from docxmlfmt.core.locator import DocCommentBlock, locate
from docxmlfmt.core.text import TextSpan

if TYPE_CHECKING:
    from pathlib import Path

    from docxmlfmt.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_docxmlfmt_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell environment does not leak into tests.

    Removes ``DOCXMLFMT_LOG_LEVEL`` (which would force DEBUG/TRACE noise) and
    ``DOCXMLFMT_WRAP_COLUMN`` (which would silently enable reflow in CLI tests).

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    monkeypatch.delenv(ENV_WRAP_COLUMN, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary project directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory (``<tmp_path>/proj``).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_options(**overrides: Any) -> FormattingOptions:
    """Return `FormattingOptions` with the given overrides applied."""
    return FormattingOptions(**overrides)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and the given argument overrides.

    Recognized keys are those of `MutableConfig.from_args` (``use_tabs``,
    ``tab_size``, ``wrap_column``, ``marker``, ``include_patterns``,
    ``exclude_patterns``).
    """
    return MutableConfig.from_defaults().merge_with(MutableConfig.from_args(overrides)).freeze()


def lines_of(*lines: str, nl: str = "\n") -> str:
    """Join lines into a text where every line, including the last, ends with ``nl``."""
    return "".join(line + nl for line in lines)


def only_block(text: str, marker: str = "///") -> DocCommentBlock:
    """Return the single doc-comment block of ``text`` (fails if there is not exactly one)."""
    blocks: list[DocCommentBlock] = list(locate(text, TextSpan.whole(text), marker))
    assert len(blocks) == 1, blocks
    return blocks[0]
