"""SelectorBuilder facade: entry points that start a fresh Selector."""

from __future__ import annotations

import logging

from cssel.model.combinator import Combinator
from cssel.model.selector import Selector

log = logging.getLogger("cssel.builder")


class SelectorBuilder:
    """Facade whose methods each return a new Selector seeded with one fragment.

    Example::

        builder.combine(
            builder.element("div").id("main"),
            ">",
            builder.element("p").class_("lead"),
        ).render()  # 'div#main > p.lead'
    """

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, name: str) -> Selector:
        return Selector().id(name)

    def class_(self, name: str) -> Selector:
        return Selector().class_(name)

    def attr(self, text: str) -> Selector:
        return Selector().attr(text)

    def pseudo_class(self, name: str) -> Selector:
        return Selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return Selector().pseudo_element(name)

    def combine(
        self, left: Selector, combinator: Combinator | str, right: Selector
    ) -> Selector:
        """Return a new Selector rendering as *left*, *combinator*, *right*.

        *left* is copied, so neither it nor anything in its chain is
        modified. When *left* is already combined, the new relation is
        attached to the tail of the copied chain. *right* is referenced
        as-is.
        """
        head = left.copy()
        head.tail().combine_with(combinator, right)
        log.debug("Combined %r via %r", left, combinator)
        return head


builder = SelectorBuilder()
