"""CSS selector builder.

Usage:
    from src.css import css_selector_builder

    css_selector_builder.element("a").attr('[href$=".png"]').pseudo_class("focus")
"""

from src.css.builder import CssSelectorBuilder, css_selector_builder
from src.css.selector import FragmentKind, Selector

__all__ = ["CssSelectorBuilder", "FragmentKind", "Selector", "css_selector_builder"]
