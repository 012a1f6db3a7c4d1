"""Multiverse id and image URL resolution from a Gatherer page URL."""

from __future__ import annotations

import re

from gatherer_scraper.errors import MissingIdentifier

IMAGE_HOST = "http://gatherer.wizards.com"
IMAGE_URL_TEMPLATE = IMAGE_HOST + "/Handlers/Image.ashx?multiverseid={id}&type=card"

_MULTIVERSE_ID_RE = re.compile(r"multiverseid=(\d+)")


def extract_multiverse_id(url: str) -> int:
    """Return the digits following ``multiverseid=`` in *url*.

    Raises MissingIdentifier when the parameter is absent or has no digits.
    """
    match = _MULTIVERSE_ID_RE.search(url)
    if match is None:
        raise MissingIdentifier(url)
    return int(match.group(1))


def build_image_url(multiverse_id: int) -> str:
    """Return the card image URL for a multiverse id."""
    return IMAGE_URL_TEMPLATE.format(id=multiverse_id)
