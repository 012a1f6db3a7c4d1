"""Error kinds raised while fetching and extracting card pages."""

from __future__ import annotations

from typing import Optional


class ExtractionError(Exception):
    """Base class for failures that abort a single card extraction."""


class MissingIdentifier(ExtractionError):
    """The source URL carries no ``multiverseid`` parameter."""

    def __init__(self, url: str) -> None:
        super().__init__(f"No multiverseid parameter in URL: {url}")
        self.url = url


class MalformedPage(ExtractionError):
    """A required field's block is missing from the page markup."""

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Required field '{field}' not found on page")
        self.field = field


class UnknownColorIndicator(MalformedPage):
    """The color indicator names a color outside the known five."""

    def __init__(self, indicator: str) -> None:
        super().__init__(
            "color_indicator",
            f"Unknown color indicator '{indicator}'",
        )
        self.indicator = indicator


class TransportError(Exception):
    """Fetching a page failed; raised by the fetcher, never by extraction."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url
