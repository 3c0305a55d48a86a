"""Stateless facade for building CSS selectors.

Usage::

    from src.css import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from src.css.selector import Selector


class CssSelectorBuilder:
    """Entry point: each method starts a fresh selector with one fragment."""

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with a combinator (' ', '>', '+', '~').

        The combinator is used verbatim and padded with one space on each side.
        Nested combinations are flattened into a single compound selector.
        """
        return Selector(parts=(*left.segments(), combinator, *right.segments()))


css_selector_builder = CssSelectorBuilder()
