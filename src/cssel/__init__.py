"""cssel -- fluent CSS selector builder."""

__version__ = "0.1.0"

from cssel.builder import SelectorBuilder, builder  # noqa: E402
from cssel.errors import DuplicateError, OrderError, ParseError, SelectorError  # noqa: E402
from cssel.model import Category, Combinator, RenderOptions, Selector  # noqa: E402
from cssel.parser import parse_selector  # noqa: E402

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "builder",
    # model
    "Category",
    "Combinator",
    "RenderOptions",
    "Selector",
    # parser
    "parse_selector",
    # errors
    "SelectorError",
    "OrderError",
    "DuplicateError",
    "ParseError",
]
