"""Tests for multiverse id and image URL resolution."""

import pytest

from gatherer_scraper.errors import MissingIdentifier
from gatherer_scraper.identifier import build_image_url, extract_multiverse_id


def test_extract_multiverse_id():
    url = "http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=226747"
    assert extract_multiverse_id(url) == 226747


def test_extract_multiverse_id_with_trailing_params():
    url = "http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=27166&part=Fire"
    assert extract_multiverse_id(url) == 27166


def test_extract_multiverse_id_first_digit_run_only():
    url = "http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=123abc456"
    assert extract_multiverse_id(url) == 123


def test_extract_multiverse_id_missing():
    with pytest.raises(MissingIdentifier) as exc_info:
        extract_multiverse_id("http://gatherer.wizards.com/Pages/Card/Details.aspx?name=Fire")
    assert "name=Fire" in exc_info.value.url


def test_extract_multiverse_id_without_digits():
    with pytest.raises(MissingIdentifier):
        extract_multiverse_id("http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=")


def test_build_image_url():
    assert build_image_url(226747) == (
        "http://gatherer.wizards.com/Handlers/Image.ashx?multiverseid=226747&type=card"
    )


def test_image_url_embeds_id_once():
    url = build_image_url(9)
    assert url.count("9") == 1
