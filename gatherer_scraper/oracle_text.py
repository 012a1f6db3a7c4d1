"""Rules (oracle) text extraction from Gatherer card text boxes."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import Comment, NavigableString, Tag

from gatherer_scraper.page import CardPage, normalize_text

logger = logging.getLogger(__name__)

TEXT_BOX_CLASS = "cardtextbox"


def extract_oracle_text(page: CardPage) -> str:
    """Join every card text box's paragraph with newlines, in page order.

    Returns an empty string when the page has no text boxes.  Double-faced
    pages contribute the paragraphs of both faces.
    """
    paragraphs: List[str] = []
    for box in page.soup.find_all("div", class_=TEXT_BOX_CLASS):
        text = paragraph_text(box)
        if text:
            paragraphs.append(text)
    return "\n".join(paragraphs)


def paragraph_text(box: Tag) -> Optional[str]:
    """Return the text of one box in the "{symbol}: text" layout.

    Leading symbol images and the colon after them are dropped.  A box
    where a symbol follows the text cannot be read and yields None.
    """
    nodes = [node for node in box.children if not isinstance(node, Comment)]
    start = 0
    while start < len(nodes) and _is_leading_symbol(nodes[start]):
        start += 1

    parts: List[str] = []
    for node in nodes[start:]:
        if isinstance(node, Tag):
            if node.name == "img" or node.find("img") is not None:
                logger.debug("Skipping text box with a trailing symbol: %s", box)
                return None
            parts.append(node.get_text())
        else:
            parts.append(str(node))

    text = normalize_text("".join(parts)).lstrip(":").strip()
    return text or None


def _is_leading_symbol(node) -> bool:
    if isinstance(node, Tag):
        return node.name == "img"
    return isinstance(node, NavigableString) and not node.strip()
