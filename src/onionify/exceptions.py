"""Exceptions raised while scraping and onionifying an article."""


class OnionifyError(Exception):
    """Base class for all onionify errors."""


class MissingCredentialError(OnionifyError):
    """A required API key is not set."""


class ScrapeError(OnionifyError):
    """The article could not be scraped to markdown."""


class ScrapeJobFailedError(ScrapeError):
    """The scrape service reported the job as failed."""


class ScrapeTimeoutError(ScrapeError):
    """The scrape job did not finish within the polling budget."""


class ScrapeEmptyResultError(ScrapeError):
    """The scrape job completed but returned no markdown."""


class SchemaValidationError(OnionifyError):
    """Model output does not match the Article schema."""

    def __init__(self, raw: str, detail: str) -> None:
        self.raw = raw
        self.detail = detail
        super().__init__(
            "Model response doesn't match expected output schema.\n"
            f"Got {raw}.\n\nValidation error: {detail}"
        )


class StepFailedError(OnionifyError):
    """An extraction or rewrite call failed; the cause is chained."""

    def __init__(self, message: str = "Failed to onionify article.") -> None:
        super().__init__(message)
