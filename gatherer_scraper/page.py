"""Parsed Gatherer card-detail page with label/value block lookups.

Gatherer renders every card attribute as a row of two divs:

  <div class="label">Types:</div>
  <div class="value">Creature — Human Rogue Werewolf</div>

Double-faced cards render one such summary per face on the same page,
each starting with a "Card Name:" row.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional

from bs4 import BeautifulSoup, Tag

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse runs of whitespace (including nbsp) and strip the ends."""
    return _WHITESPACE_RE.sub(" ", text.replace("\xa0", " ")).strip()


class CardPage:
    """Read-only view over one page's markup."""

    def __init__(self, markup: str) -> None:
        self._soup = BeautifulSoup(markup, "html.parser")

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def contains_text(self, text: str) -> bool:
        """Return True if any text node on the page contains *text*."""
        return self._soup.find(string=lambda s: s is not None and text in s) is not None

    def element(self, element_id: str) -> Optional[Tag]:
        """Return the element with *element_id*, if any."""
        return self._soup.find(id=element_id)

    def labels(self) -> List[Tag]:
        """Return every label div in document order."""
        return self._soup.find_all("div", class_="label")

    def iter_labels(self, text: str) -> Iterator[Tag]:
        """Yield label divs whose text equals *text*."""
        for label in self.labels():
            if label_text(label) == text:
                yield label

    def value_for(self, label_name: str) -> Optional[Tag]:
        """Return the value div of the first row labeled *label_name*."""
        for label in self.iter_labels(label_name):
            value = value_of(label)
            if value is not None:
                return value
        return None


def label_text(label: Tag) -> str:
    return normalize_text(label.get_text())


def value_of(label: Tag) -> Optional[Tag]:
    """Return the value div paired with a label div."""
    return label.find_next_sibling("div", class_="value")
