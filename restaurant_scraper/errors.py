class ScraperError(Exception):
    """Base class for scraper exceptions."""


class FetchError(ScraperError):
    """Raised when a listing page cannot be retrieved."""

    def __init__(self, url: str, reason: Exception | str):
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url


class ExtractionError(ScraperError):
    """Raised when a page cannot be turned into a record at all."""


class PanelNotFoundError(ExtractionError):
    """Raised when the restaurant info table is missing from a page."""
