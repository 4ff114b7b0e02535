"""Lark Transformer that converts a selector parse tree into a Selector."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from cssel.builder import builder
from cssel.errors import ParseError
from cssel.model.combinator import Combinator
from cssel.model.selector import Selector

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger("cssel.parser")


class _Fragment:
    """One fragment in source order, replayed onto a Selector later."""

    def __init__(self, method: str, value: str):
        self.method = method
        self.value = value

    def apply(self, selector: Selector) -> Selector:
        return getattr(selector, self.method)(self.value)


class _Compound:
    def __init__(self, fragments: list[_Fragment]):
        self.fragments = fragments


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into compounds and combinator symbols.

    Fragments are not applied here so that ordering and duplicate errors
    reach the caller unwrapped.
    """

    # ---- fragments ----

    def element(self, items: list[Token]) -> _Fragment:
        return _Fragment("element", str(items[0]))

    def id(self, items: list[Token]) -> _Fragment:
        return _Fragment("id", str(items[0]))

    def class_(self, items: list[Token]) -> _Fragment:
        return _Fragment("class_", str(items[0]))

    def attr(self, items: list[Token]) -> _Fragment:
        return _Fragment("attr", str(items[0]))

    def pseudo_class(self, items: list[Token]) -> _Fragment:
        return _Fragment("pseudo_class", "".join(str(t) for t in items))

    def pseudo_element(self, items: list[Token]) -> _Fragment:
        return _Fragment("pseudo_element", "".join(str(t) for t in items))

    # ---- structural ----

    def COMBINATOR(self, token: Token) -> str:
        # A bare run of whitespace is the descendant combinator.
        return token.strip() or Combinator.DESCENDANT.value

    def compound(self, items: list[_Fragment]) -> _Compound:
        return _Compound(items)

    def complex(self, items: list[object]) -> list[object]:
        return items

    def start(self, items: list[object]) -> list[object]:
        return items[0]  # type: ignore[return-value]


def _build_compound(compound: _Compound) -> Selector:
    selector = Selector()
    for fragment in compound.fragments:
        fragment.apply(selector)
    return selector


def _assemble_selector(items: list[object]) -> Selector:
    """Fold ``[compound, symbol, compound, ...]`` right-associatively."""
    compounds = [_build_compound(item) for item in items[0::2]]  # type: ignore[arg-type]
    symbols = [str(item) for item in items[1::2]]

    result = compounds[-1]
    for left, symbol in zip(reversed(compounds[:-1]), reversed(symbols)):
        result = builder.combine(left, symbol, result)
    return result


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_selector(source: str) -> Selector:
    """Parse rendered selector text back into a Selector.

    Raises ParseError for text outside the selector grammar, and
    OrderError / DuplicateError when the fragments are well formed but
    arranged in a way the builder rejects.
    """
    text = source.strip()
    try:
        tree = _parser().parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    items = SelectorTransformer().transform(tree)
    selector = _assemble_selector(items)
    log.debug("Parsed %r into %r", source, selector)
    return selector
