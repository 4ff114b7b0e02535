"""Tests for the selector text parser."""

import pytest

from cssel import builder
from cssel.errors import DuplicateError, OrderError
from cssel.model import Combinator
from cssel.parser import ParseError, parse_selector


# ---------------------------------------------------------------------------
# Compound selectors
# ---------------------------------------------------------------------------


class TestCompound:
    def test_element(self):
        sel = parse_selector("div")
        assert sel.element_name == "div"
        assert sel.render() == "div"

    def test_universal(self):
        assert parse_selector("*").element_name == "*"

    def test_full_compound_fields(self):
        sel = parse_selector('a#home.nav.active[href$=".png"]:hover::after')
        assert sel.element_name == "a"
        assert sel.id_name == "home"
        assert sel.class_names == ("nav", "active")
        assert sel.attributes == ('href$=".png"',)
        assert sel.pseudo_classes == ("hover",)
        assert sel.pseudo_element_name == "after"

    def test_pseudo_class_arguments(self):
        sel = parse_selector("tr:nth-of-type(even)")
        assert sel.pseudo_classes == ("nth-of-type(even)",)

    def test_attribute_with_bracket_in_quotes(self):
        sel = parse_selector('input[value="]"]')
        assert sel.attributes == ('value="]"',)

    def test_hyphenated_names(self):
        sel = parse_selector("my-widget.is-open")
        assert sel.element_name == "my-widget"
        assert sel.class_names == ("is-open",)

    def test_nested_pseudo_class_arguments(self):
        sel = parse_selector("li:not(:nth-child(2))")
        assert sel.pseudo_classes == ("not(:nth-child(2))",)
        assert sel.render() == "li:not(:nth-child(2))"

    def test_pseudo_element_arguments(self):
        sel = parse_selector("my-button::part(label)")
        assert sel.pseudo_element_name == "part(label)"

    def test_attribute_operators(self):
        assert parse_selector('a[rel~="tag"]:nth-child(2n+1)').render() == (
            'a[rel~="tag"]:nth-child(2n+1)'
        )

    def test_surrounding_whitespace_ignored(self):
        assert parse_selector("  p.lead \n").render() == "p.lead"


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------


class TestCombinators:
    @pytest.mark.parametrize(
        "text, symbol",
        [
            ("ul > li", Combinator.CHILD),
            ("ul>li", Combinator.CHILD),
            ("h1 + p", Combinator.ADJACENT_SIBLING),
            ("h1~p", Combinator.GENERAL_SIBLING),
            ("tr td", Combinator.DESCENDANT),
            ("tr   td", Combinator.DESCENDANT),
        ],
    )
    def test_symbol(self, text, symbol):
        sel = parse_selector(text)
        assert sel.combination is not None
        assert sel.combination[0] is symbol

    def test_compact_input_rendered_with_spaces(self):
        assert parse_selector("ul>li").render() == "ul > li"

    def test_right_associative_chain(self):
        sel = parse_selector("a + b ~ c")
        assert sel.element_name == "a"
        assert sel.combination is not None
        symbol, right = sel.combination
        assert symbol is Combinator.ADJACENT_SIBLING
        assert right.element_name == "b"
        assert right.combination is not None
        assert right.combination[0] is Combinator.GENERAL_SIBLING
        assert right.combination[1].render() == "c"

    def test_long_chain(self):
        text = " > ".join(["a"] * 2000)
        sel = parse_selector(text)
        assert len(sel.chain()) == 2000
        assert sel.render() == text

    def test_round_trip_complex_example(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        rendered = sel.render()
        assert parse_selector(rendered).render() == rendered


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_out_of_order_fragments(self):
        with pytest.raises(OrderError):
            parse_selector("[href].link")

    def test_pseudo_class_after_pseudo_element(self):
        with pytest.raises(OrderError):
            parse_selector("a::before:hover")

    def test_duplicate_id(self):
        with pytest.raises(DuplicateError):
            parse_selector("#a#b")

    def test_duplicate_pseudo_element(self):
        with pytest.raises(DuplicateError):
            parse_selector("p::before::after")

    def test_empty_input(self):
        with pytest.raises(ParseError):
            parse_selector("")

    def test_trailing_combinator(self):
        with pytest.raises(ParseError):
            parse_selector("ul >")

    def test_unclosed_attribute(self):
        with pytest.raises(ParseError):
            parse_selector("a[href")

    def test_parse_error_has_position(self):
        with pytest.raises(ParseError) as excinfo:
            parse_selector("div$")
        assert excinfo.value.column is not None

    def test_opaque_combinator_is_not_parsed(self):
        rendered = builder.combine(builder.element("a"), "||", builder.element("b")).render()
        assert rendered == "a || b"
        with pytest.raises(ParseError):
            parse_selector(rendered)
