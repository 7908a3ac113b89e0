"""
Hand-off to an external renderer.

The renderer takes one builder string and returns markup, or None when it
cannot draw it. Multi-word symbols are rendered one word at a time so the
caller can space the words apart.
"""

import logging
from typing import Callable

from blissword.core.codec import encode
from blissword.core.errors import UnknownIdentifier
from blissword.core.idmap import IdMap
from blissword.core.symbols import SymbolExpr, split_words

logger = logging.getLogger(__name__)

Renderer = Callable[[str], "str | None"]


def builder_strings(expr: SymbolExpr, id_map: IdMap) -> list[str]:
    """One builder string per word. Raises UnknownIdentifier for unmapped IDs."""
    return [encode(word, id_map) for word in split_words(expr)]


def render_words(expr: SymbolExpr, id_map: IdMap, renderer: Renderer) -> list[str] | None:
    """Markup for each word, or None if any word cannot be encoded or drawn."""
    try:
        codes = builder_strings(expr, id_map)
    except UnknownIdentifier as e:
        logger.error("Cannot render %s: %s", expr, e)
        return None

    markup = []
    for code in codes:
        rendered = renderer(code)
        if rendered is None:
            logger.error("Renderer failed on %r", code)
            return None
        markup.append(rendered)
    return markup
