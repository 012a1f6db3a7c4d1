"""Card record produced by a single Gatherer page extraction."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

COLORLESS = "colorless"


@dataclass(frozen=True)
class CardRecord:
    """One extracted card printing.

    Built once by the record assembler and never updated in place.
    Sequence fields are tuples so the record stays hashable.
    """

    source_url: str
    multiverse_id: int
    image_url: str
    name: str
    types: str
    rarity: str
    colors: Tuple[str, ...]
    mana_cost: Optional[Tuple[str, ...]] = None
    converted_cost: int = 0
    oracle_text: str = ""
    power: Optional[str] = None  # String: can be *, X, 1+*, etc.
    toughness: Optional[str] = None
    loyalty: Optional[str] = None
    color_indicator: Optional[str] = None

    @property
    def is_colorless(self) -> bool:
        return self.colors == (COLORLESS,)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable mapping keyed by field name."""
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                value = list(value)
            data[f.name] = value
        return data
