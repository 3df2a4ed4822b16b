# topmark:header:start
#
#   project      : DocXmlFmt
#   file         : cli_types.py
#   file_relpath : src/docxmlfmt/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the DocXmlFmt CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import click

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

        def fail(
            self,
            message: str,
            param: click.Parameter | None = None,
            ctx: click.Context | None = None,
        ) -> Any: ...

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]


class IntPairParam(ParamTypeBase):
    """Click parameter type for ``A:B`` pairs of non-negative integers.

    Used for line ranges (``--lines 3:7``) and offset ranges (``--range 10:42``).
    The value converts to a ``(first, second)`` tuple with ``first <= second``.
    """

    name = "A:B"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> tuple[int, int]:
        if isinstance(value, tuple):
            return value  # type: ignore[return-value]
        text: str = str(value)
        first, sep, second = text.partition(":")
        if not sep:
            self.fail(f"expected A:B, got {text!r}", param, ctx)
        try:
            a, b = int(first), int(second)
        except ValueError:
            self.fail(f"expected two integers, got {text!r}", param, ctx)
        if a < 0 or b < 0:
            self.fail(f"values must not be negative, got {text!r}", param, ctx)
        if a > b:
            self.fail(f"first value must not exceed the second, got {text!r}", param, ctx)
        return a, b
