"""Declarative field rules for the Gatherer card-detail page.

Each rule names one field, where its block lives on the page (a label row
or an element id), whether the field is required, and how the located
block is turned into a value.  Mana cost and rules text have their own
modules since they need more than a single block lookup.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from bs4 import Tag

from gatherer_scraper.errors import MalformedPage
from gatherer_scraper.page import CardPage, normalize_text

logger = logging.getLogger(__name__)

NAME_ELEMENT_ID = "ctl00_ctl00_ctl00_MainContent_SubContent_SubContentHeader_subtitleDisplay"

_DIGITS_RE = re.compile(r"\d+")


# ---------------------------------------------------------------------------
# Post-processing
# ---------------------------------------------------------------------------


def parse_text(tag: Tag) -> str:
    return normalize_text(tag.get_text())


def parse_converted_cost(tag: Tag) -> Optional[int]:
    match = _DIGITS_RE.search(tag.get_text())
    return int(match.group(0)) if match else None


def parse_rarity(tag: Tag) -> str:
    """Return only the visible rarity word, dropping the span's attributes."""
    span = tag.find("span")
    return normalize_text((span or tag).get_text())


def parse_power_toughness(tag: Tag) -> Optional[Tuple[str, str]]:
    """Split a "P / T" block into (power, toughness)."""
    text = parse_text(tag)
    if "/" not in text:
        return None
    power, toughness = (part.strip() for part in text.split("/", 1))
    if not power or not toughness:
        return None
    return power, toughness


@dataclass(frozen=True)
class FieldRule:
    """How to locate and post-process one card field."""

    name: str
    label: Optional[str] = None  # e.g. "Types:"
    element_id: Optional[str] = None
    required: bool = False
    parse: Callable[[Tag], Any] = parse_text
    default: Any = None

    def locate(self, page: CardPage) -> Optional[Tag]:
        if self.element_id is not None:
            return page.element(self.element_id)
        if self.label is not None:
            return page.value_for(self.label)
        raise ValueError(f"Field rule '{self.name}' has neither label nor element_id")

    def extract(self, page: CardPage) -> Any:
        """Return the field value, the default, or raise MalformedPage."""
        block = self.locate(page)
        value = self.parse(block) if block is not None else None
        if value is None or value == "":
            if self.required:
                raise MalformedPage(self.name)
            logger.debug("Optional field %s absent, using %r", self.name, self.default)
            return self.default
        return value


# Label rows match the first occurrence on the page.  On double-faced
# pages this means both faces report the first face's types, P/T and
# indicator; the faces are not linked, so this is expected behavior.
FIELD_RULES: List[FieldRule] = [
    FieldRule("name", element_id=NAME_ELEMENT_ID, required=True, parse=parse_text),
    FieldRule("converted_cost", label="Converted Mana Cost:", parse=parse_converted_cost, default=0),
    FieldRule("types", label="Types:", required=True, parse=parse_text),
    FieldRule("power_toughness", label="P/T:", parse=parse_power_toughness),
    FieldRule("loyalty", label="Loyalty:", parse=parse_text),
    FieldRule("color_indicator", label="Color Indicator:", parse=parse_text),
    FieldRule("rarity", label="Rarity:", required=True, parse=parse_rarity),
]

RULES_BY_NAME: Dict[str, FieldRule] = {rule.name: rule for rule in FIELD_RULES}


def extract_fields(page: CardPage) -> Dict[str, Any]:
    """Run every rule against *page*.

    The joint P/T block is split into separate ``power`` and
    ``toughness`` entries.  Raises MalformedPage on the first missing
    required field.
    """
    values: Dict[str, Any] = {}
    for rule in FIELD_RULES:
        values[rule.name] = rule.extract(page)

    pt = values.pop("power_toughness")
    values["power"], values["toughness"] = pt if pt else (None, None)
    return values


def extract_name(page: CardPage) -> str:
    """Return the page's primary displayed card name."""
    return RULES_BY_NAME["name"].extract(page)
