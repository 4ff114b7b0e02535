"""Error hierarchy for selector construction and parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssel.model.category import Category


class SelectorError(Exception):
    """Base error for all cssel errors."""


class OrderError(SelectorError):
    """A fragment or combine call arrived out of the fixed category order.

    Selector parts must be arranged as: element, id, class, attribute,
    pseudo-class, pseudo-element. Nothing may follow a combine.
    """

    def __init__(
        self,
        message: str,
        *,
        category: Category | None = None,
        reached: Category | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.reached = reached


class DuplicateError(SelectorError):
    """Element, id or pseudo-element was set more than once."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class ParseError(SelectorError):
    """Raised when selector text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
