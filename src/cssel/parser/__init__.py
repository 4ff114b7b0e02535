from cssel.errors import ParseError
from cssel.parser.transformer import parse_selector

__all__ = ["ParseError", "parse_selector"]
