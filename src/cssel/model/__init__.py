"""cssel model layer -- public type re-exports."""

from cssel.model.category import Category
from cssel.model.combinator import Combinator, coerce_combinator
from cssel.model.config import RenderOptions
from cssel.model.selector import Selector

__all__ = [
    "Category",
    "Combinator",
    "coerce_combinator",
    "RenderOptions",
    "Selector",
]
