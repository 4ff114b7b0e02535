"""Fragment categories, ranked in the order they may appear in a selector."""

from __future__ import annotations

from enum import IntEnum


class Category(IntEnum):
    """Rank of a fragment category.

    A selector may only move forward through these values. ``COMBINED`` is
    terminal: once reached, no further fragment or combine is accepted.
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6
    COMBINED = 7

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

