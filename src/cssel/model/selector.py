"""Selector: a fluent builder for one compound selector and its combinator chain."""

from __future__ import annotations

from cssel.errors import DuplicateError, OrderError
from cssel.model.category import Category
from cssel.model.combinator import Combinator, coerce_combinator
from cssel.model.config import DEFAULT_RENDER_OPTIONS, RenderOptions

_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
_DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class Selector:
    """A compound selector under construction.

    Fragments are added through chained calls which return the same
    instance::

        Selector().element("a").attr('href$=".png"').pseudo_class("focus")

    Categories must arrive in the fixed order element, id, class, attribute,
    pseudo-class, pseudo-element. A failed call raises and leaves the
    fragments gathered so far untouched.
    """

    def __init__(self) -> None:
        self._element: str | None = None
        self._id: str | None = None
        self._classes: list[str] = []
        self._attributes: list[str] = []
        self._pseudo_classes: list[str] = []
        self._pseudo_element: str | None = None
        self._combination: tuple[Combinator | str, Selector] | None = None
        self._reached: Category | None = None

    # --- read-only views ---------------------------------------------------

    @property
    def element_name(self) -> str | None:
        return self._element

    @property
    def id_name(self) -> str | None:
        return self._id

    @property
    def class_names(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._attributes)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._pseudo_classes)

    @property
    def pseudo_element_name(self) -> str | None:
        return self._pseudo_element

    @property
    def combination(self) -> tuple[Combinator | str, Selector] | None:
        return self._combination

    @property
    def reached(self) -> Category | None:
        """Highest category added so far, or None for an empty selector."""
        return self._reached

    @property
    def is_combined(self) -> bool:
        return self._combination is not None

    # --- ordering ------------------------------------------------------------

    def _check_order(self, category: Category) -> None:
        reached = self._reached
        if reached is not None and (
            category < reached or reached is Category.COMBINED
        ):
            raise OrderError(
                f"{_ORDER_MESSAGE} (got {category.label} after {reached.label})",
                category=category,
                reached=reached,
            )

    def _advance(self, category: Category) -> None:
        self._reached = category

    def _check_unset(self, current: str | None, category: Category) -> None:
        if current is not None:
            raise DuplicateError(
                f"{_DUPLICATE_MESSAGE} ({category.label} already set)",
                category=category,
            )

    # --- fragments -----------------------------------------------------------

    def element(self, name: str) -> Selector:
        self._check_order(Category.ELEMENT)
        self._check_unset(self._element, Category.ELEMENT)
        self._element = name
        self._advance(Category.ELEMENT)
        return self

    def id(self, name: str) -> Selector:
        self._check_order(Category.ID)
        self._check_unset(self._id, Category.ID)
        self._id = name
        self._advance(Category.ID)
        return self

    def class_(self, name: str) -> Selector:
        self._check_order(Category.CLASS)
        self._classes.append(name)
        self._advance(Category.CLASS)
        return self

    def attr(self, text: str) -> Selector:
        self._check_order(Category.ATTRIBUTE)
        self._attributes.append(text)
        self._advance(Category.ATTRIBUTE)
        return self

    def pseudo_class(self, name: str) -> Selector:
        self._check_order(Category.PSEUDO_CLASS)
        self._pseudo_classes.append(name)
        self._advance(Category.PSEUDO_CLASS)
        return self

    def pseudo_element(self, name: str) -> Selector:
        self._check_order(Category.PSEUDO_ELEMENT)
        self._check_unset(self._pseudo_element, Category.PSEUDO_ELEMENT)
        self._pseudo_element = name
        self._advance(Category.PSEUDO_ELEMENT)
        return self

    def combine_with(self, combinator: Combinator | str, right: Selector) -> Selector:
        """Attach *right* after this selector, joined by *combinator*.

        Terminal: no fragment or further combine may follow.
        """
        self._check_order(Category.COMBINED)
        self._combination = (coerce_combinator(combinator), right)
        self._advance(Category.COMBINED)
        return self

    # --- derived values ------------------------------------------------------

    def chain(self) -> list[Selector]:
        """Return the selectors of the combinator chain, this one first."""
        nodes = [self]
        while nodes[-1]._combination is not None:
            nodes.append(nodes[-1]._combination[1])
        return nodes

    def _copy_compound(self) -> Selector:
        clone = Selector()
        clone._element = self._element
        clone._id = self._id
        clone._classes = list(self._classes)
        clone._attributes = list(self._attributes)
        clone._pseudo_classes = list(self._pseudo_classes)
        clone._pseudo_element = self._pseudo_element
        clone._reached = self._reached
        return clone

    def copy(self) -> Selector:
        """Return an independent copy, including the combinator chain."""
        head = self._copy_compound()
        last = head
        for node in self.chain()[:-1]:
            combinator, right = node._combination  # type: ignore[misc]
            clone = right._copy_compound()
            last._combination = (combinator, clone)
            last = clone
        return head

    def tail(self) -> Selector:
        """Return the last selector of the combinator chain."""
        return self.chain()[-1]

    def specificity(self) -> tuple[int, int, int]:
        """CSS specificity ``(ids, classes, elements)`` summed over the chain."""
        ids = classes = elements = 0
        for node in self.chain():
            if node._id is not None:
                ids += 1
            classes += (
                len(node._classes) + len(node._attributes) + len(node._pseudo_classes)
            )
            if node._element is not None and node._element != "*":
                elements += 1
            if node._pseudo_element is not None:
                elements += 1
        return ids, classes, elements

    def _render_compound(self) -> str:
        parts: list[str] = []
        if self._element is not None:
            parts.append(self._element)
        if self._id is not None:
            parts.append(f"#{self._id}")
        parts.extend(f".{name}" for name in self._classes)
        parts.extend(f"[{text}]" for text in self._attributes)
        parts.extend(f":{name}" for name in self._pseudo_classes)
        if self._pseudo_element is not None:
            parts.append(f"::{self._pseudo_element}")
        return "".join(parts)

    def render(self, options: RenderOptions | None = None) -> str:
        """Render the selector and its chain as CSS text.

        Each link renders as `` <combinator> `` between the two sides.
        Fragment text is emitted verbatim, without escaping.
        """
        options = options or DEFAULT_RENDER_OPTIONS
        parts: list[str] = []
        for node in self.chain():
            parts.append(node._render_compound())
            if node._combination is None:
                break
            combinator = node._combination[0]
            if options.normalize_descendant and combinator == Combinator.DESCENDANT:
                parts.append(" ")
            else:
                parts.append(f" {combinator} ")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"
