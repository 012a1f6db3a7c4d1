"""Card color resolution from the color indicator and mana cost."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from gatherer_scraper.errors import UnknownColorIndicator
from gatherer_scraper.models import COLORLESS

INDICATOR_TO_COLOR: Dict[str, str] = {
    "Red": "R",
    "Blue": "U",
    "Green": "G",
    "White": "W",
    "Black": "B",
}

# Matches anywhere inside a token, so hybrid or special symbol names whose
# spelling contains one of these letters also count as that color.
_COLOR_LETTER_RE = re.compile(r"[ubrgw]", re.IGNORECASE)


def resolve_colors(
    mana_cost: Optional[Sequence[str]],
    color_indicator: Optional[str],
) -> Tuple[str, ...]:
    """Return the card's colors.

    The color indicator wins over the mana cost when present.  Otherwise
    color letters are collected from the mana symbols in order of first
    appearance.  Cards with neither resolve to ("colorless",).
    """
    if color_indicator:
        return indicator_colors(color_indicator)

    if mana_cost:
        found = _COLOR_LETTER_RE.findall("".join(mana_cost))
        colors: List[str] = []
        for letter in found:
            letter = letter.upper()
            if letter not in colors:
                colors.append(letter)
        if colors:
            return tuple(colors)

    return (COLORLESS,)


def indicator_colors(color_indicator: str) -> Tuple[str, ...]:
    """Map an indicator such as "Red" or "Blue, Black" to color letters."""
    colors: List[str] = []
    for name in color_indicator.split(","):
        name = name.strip()
        if not name:
            continue
        if name not in INDICATOR_TO_COLOR:
            raise UnknownColorIndicator(color_indicator)
        color = INDICATOR_TO_COLOR[name]
        if color not in colors:
            colors.append(color)
    if not colors:
        raise UnknownColorIndicator(color_indicator)
    return tuple(colors)
