"""Mana cost resolution for single, double-faced and multi-part pages.

Gatherer shows both faces of a double-faced card (e.g. Kruin Outlaw and
Terror of Kruin Pass) on one page, but only the front face has a mana
cost.  The cost therefore has to come from the summary block whose
"Card Name:" matches the page's displayed name, never from the other
face's block.

Multi-part cards (e.g. Fire // Ice) get one page per half, and the
displayed name there does not match the summary block.  Those pages
carry a single mana cost block, which is taken as is.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple
from urllib.parse import parse_qs, urlsplit

from bs4 import Tag

from gatherer_scraper.page import CardPage, label_text, normalize_text, value_of

logger = logging.getLogger(__name__)

MULTI_PART_MARKER = "This is one part of the multi-part card"
CARD_NAME_LABEL = "Card Name:"
MANA_COST_LABEL = "Mana Cost:"

SYMBOL_HANDLER_PATH = "/Handlers/Image.ashx"
_SYMBOL_NAME_RE = re.compile(r"^[a-zA-Z0-9]+$")


def is_multi_part(page: CardPage) -> bool:
    return page.contains_text(MULTI_PART_MARKER)


def resolve_mana_cost(page: CardPage, name: str) -> Optional[Tuple[str, ...]]:
    """Return the ordered mana symbols for the card named *name*, or None."""
    if is_multi_part(page):
        logger.debug("Multi-part page for %s, using the single mana cost block", name)
        block = page.value_for(MANA_COST_LABEL)
    else:
        block = _mana_cost_block_for(page, name)

    if block is None:
        logger.debug("No mana cost block for %s", name)
        return None
    return parse_mana_symbols(block)


def _mana_cost_block_for(page: CardPage, name: str) -> Optional[Tag]:
    """Find the Mana Cost value belonging to the summary block named *name*.

    The search starts at the matching "Card Name:" row and stops at the
    next "Card Name:" row, so a cost from another face is never used.
    """
    in_block = False
    for label in page.labels():
        text = label_text(label)
        if text == CARD_NAME_LABEL:
            if in_block:
                return None
            value = value_of(label)
            in_block = value is not None and normalize_text(value.get_text()) == name
        elif in_block and text == MANA_COST_LABEL:
            return value_of(label)
    return None


def parse_mana_symbols(block: Tag) -> Optional[Tuple[str, ...]]:
    """Return symbol names from the medium-size symbol images in *block*.

    Returns None when the block holds no symbol image.
    """
    symbols: List[str] = []
    for img in block.find_all("img"):
        symbol = symbol_name(img.get("src", ""), size="medium")
        if symbol is not None:
            symbols.append(symbol)
    return tuple(symbols) if symbols else None


def symbol_name(src: str, size: Optional[str] = None) -> Optional[str]:
    """Return the ``name`` parameter of a Gatherer symbol image URL.

    When *size* is given, images of any other size are ignored.
    """
    parts = urlsplit(src)
    if not parts.path.endswith(SYMBOL_HANDLER_PATH):
        return None
    params = parse_qs(parts.query)
    if size is not None and params.get("size", [None])[0] != size:
        return None
    name = params.get("name", [None])[0]
    if name is None or not _SYMBOL_NAME_RE.match(name):
        return None
    return name
