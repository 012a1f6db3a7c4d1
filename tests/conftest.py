"""Synthetic Gatherer card-detail markup for tests."""

from typing import List, Optional, Sequence

import pytest

from gatherer_scraper.fields import NAME_ELEMENT_ID

KRUIN_URL = "http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=226747"
TERROR_URL = "http://gatherer.wizards.com/Pages/Card/Details.aspx?multiverseid=226721"


def symbol(name: str, size: str = "medium") -> str:
    return (
        f'<img src="/Handlers/Image.ashx?size={size}&amp;name={name}&amp;type=symbol" '
        f'alt="{name}" align="absbottom" />'
    )


def row(label: str, value_html: str) -> str:
    return (
        '<div class="row">\n'
        f'  <div class="label">\n                            {label}</div>\n'
        f'  <div class="value">\n                            {value_html}</div>\n'
        "</div>\n"
    )


def face(
    name: str,
    mana: Optional[Sequence[str]] = None,
    cmc: Optional[int] = None,
    types: Optional[str] = "Creature — Human Rogue Werewolf",
    texts: Sequence[str] = (),
    pt: Optional[str] = None,
    loyalty: Optional[str] = None,
    indicator: Optional[str] = None,
    rarity: Optional[str] = "<span class='R'>Rare</span>",
) -> str:
    """Render one card summary block as Gatherer lays it out."""
    parts: List[str] = ['<td class="rightCol">', row("Card Name:", name)]
    if mana is not None:
        parts.append(row("Mana Cost:", "".join(symbol(s) for s in mana)))
    if cmc is not None:
        parts.append(row("Converted Mana Cost:", f"{cmc}<br /><br />"))
    if types is not None:
        parts.append(row("Types:", types))
    if texts:
        boxes = "".join(f'<div class="cardtextbox">{t}</div>' for t in texts)
        parts.append(row("Card Text:", boxes))
    if pt is not None:
        parts.append(row("P/T:", pt))
    if loyalty is not None:
        parts.append(row("Loyalty:", loyalty))
    if indicator is not None:
        parts.append(row("Color Indicator:", indicator))
    if rarity is not None:
        parts.append(row("Rarity:", rarity))
    parts.append("</td>")
    return "\n".join(parts)


def page(title: Optional[str], *faces: str, multi_part: bool = False) -> str:
    """Render a full card page with a displayed title and face blocks."""
    header = ""
    if title is not None:
        header = f'<span id="{NAME_ELEMENT_ID}" style="display:inline-block;">{title}</span>'
    notice = ""
    if multi_part:
        notice = (
            '<div class="smallGreyMono">This is one part of the multi-part card '
            "Fire // Ice.</div>"
        )
    body = "\n".join(f"<tr>{f}</tr>" for f in faces)
    return (
        "<html><head><title>Card Details</title></head><body>\n"
        f"{header}\n{notice}\n"
        f'<table class="cardDetails">{body}</table>\n'
        "</body></html>"
    )


KRUIN_FACE = face(
    "Kruin Outlaw",
    mana=["1", "R", "R"],
    cmc=3,
    texts=[
        "First strike",
        "At the beginning of each upkeep, if no spells were cast last turn, "
        "transform Kruin Outlaw.",
    ],
    pt="2 / 2",
)
TERROR_FACE = face(
    "Terror of Kruin Pass",
    types="Creature — Werewolf",
    texts=["Double strike"],
    pt="3 / 3",
    indicator="Red",
)


@pytest.fixture
def kruin_page() -> str:
    return page("Kruin Outlaw", KRUIN_FACE, TERROR_FACE)


@pytest.fixture
def terror_page() -> str:
    return page("Terror of Kruin Pass", KRUIN_FACE, TERROR_FACE)


@pytest.fixture
def fire_page() -> str:
    fire = face(
        "Fire // Ice",
        mana=["1", "R"],
        cmc=2,
        types="Instant",
        texts=["Fire deals 2 damage divided as you choose among one or two targets."],
        rarity="<span class='U'>Uncommon</span>",
    )
    return page("Fire", fire, multi_part=True)
