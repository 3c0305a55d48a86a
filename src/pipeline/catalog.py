"""Catalog compiler: turns configured selector definitions into CSS text.

Data flow:
  1. Each SelectorDefinition → Selector (fragments applied in canonical order)
  2. Each Combination, in file order → compound Selector
  3. Render every Selector with stringify()
"""

import logging

from src.core.config import SelectorDefinition, Settings
from src.css.builder import css_selector_builder
from src.css.selector import Selector
from src.objects.json_codec import to_json

logger = logging.getLogger(__name__)


def build_selector(definition: SelectorDefinition) -> Selector:
    """Build a Selector from a definition, one fragment kind at a time."""
    selector = Selector()
    if definition.element is not None:
        selector = selector.element(definition.element)
    if definition.id is not None:
        selector = selector.id(definition.id)
    for value in definition.classes:
        selector = selector.class_(value)
    for value in definition.attrs:
        selector = selector.attr(value)
    for value in definition.pseudo_classes:
        selector = selector.pseudo_class(value)
    if definition.pseudo_element is not None:
        selector = selector.pseudo_element(definition.pseudo_element)
    return selector


def compile_catalog(settings: Settings) -> dict[str, str]:
    """Render every configured selector and combination.

    Returns a dict of name → CSS selector text, selectors first and then
    combinations, each group in configuration order.
    """
    built: dict[str, Selector] = {}

    for name, definition in settings.selectors.items():
        built[name] = build_selector(definition)
        logger.debug("Selector '%s': %s", name, built[name])

    for combo in settings.combinations:
        built[combo.name] = css_selector_builder.combine(
            built[combo.left], combo.combinator, built[combo.right],
        )
        logger.debug(
            "Combination '%s' = '%s' %r '%s'",
            combo.name, combo.left, combo.combinator, combo.right,
        )

    catalog = {name: selector.stringify() for name, selector in built.items()}
    logger.info(
        "Compiled %d selectors (%d combinations)",
        len(catalog), len(settings.combinations),
    )
    return catalog


def export_catalog_json(catalog: dict[str, str]) -> str:
    """Export a compiled catalog as a JSON string."""
    return to_json(catalog, indent=2)
