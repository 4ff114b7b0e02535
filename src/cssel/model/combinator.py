"""Combinator symbols joining two selectors."""

from __future__ import annotations

import logging
from enum import StrEnum

log = logging.getLogger("cssel")


class Combinator(StrEnum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


def coerce_combinator(symbol: Combinator | str) -> Combinator | str:
    """Map *symbol* onto a known Combinator.

    Unknown symbols are kept as opaque text and rendered verbatim.
    """
    if isinstance(symbol, Combinator):
        return symbol
    try:
        return Combinator(symbol)
    except ValueError:
        log.warning("Unrecognised combinator %r, rendering verbatim", symbol)
        return symbol
