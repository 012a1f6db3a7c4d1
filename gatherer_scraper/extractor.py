"""Card record assembly from a page URL and its markup."""

from __future__ import annotations

import logging

from gatherer_scraper.colors import resolve_colors
from gatherer_scraper.fields import extract_fields
from gatherer_scraper.identifier import build_image_url, extract_multiverse_id
from gatherer_scraper.mana_cost import resolve_mana_cost
from gatherer_scraper.models import CardRecord
from gatherer_scraper.oracle_text import extract_oracle_text
from gatherer_scraper.page import CardPage

logger = logging.getLogger(__name__)


def extract_card(url: str, markup: str) -> CardRecord:
    """Extract one CardRecord from a Gatherer card-detail page.

    The identifier is resolved from *url* before any markup is parsed.
    Raises MissingIdentifier or MalformedPage; a record is only returned
    when every required field was found.
    """
    multiverse_id = extract_multiverse_id(url)
    page = CardPage(markup)

    values = extract_fields(page)
    mana_cost = resolve_mana_cost(page, values["name"])
    colors = resolve_colors(mana_cost, values["color_indicator"])

    record = CardRecord(
        source_url=url,
        multiverse_id=multiverse_id,
        image_url=build_image_url(multiverse_id),
        name=values["name"],
        types=values["types"],
        rarity=values["rarity"],
        colors=colors,
        mana_cost=mana_cost,
        converted_cost=values["converted_cost"],
        oracle_text=extract_oracle_text(page),
        power=values["power"],
        toughness=values["toughness"],
        loyalty=values["loyalty"],
        color_indicator=values["color_indicator"],
    )
    logger.debug("Extracted %s (multiverseid=%d)", record.name, multiverse_id)
    return record


class CardExtractor:
    """Extractor bound to one card URL."""

    def __init__(self, url: str) -> None:
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    @property
    def multiverse_id(self) -> int:
        return extract_multiverse_id(self._url)

    def extract(self, markup: str) -> CardRecord:
        return extract_card(self._url, markup)
