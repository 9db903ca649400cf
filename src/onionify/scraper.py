"""Scraper protocol — the scrape-service abstraction layer."""

from typing import Protocol, runtime_checkable

from onionify.models import ScrapeJob


@runtime_checkable
class Scraper(Protocol):
    def start(self, url: str) -> str: ...

    def get(self, job_id: str) -> ScrapeJob: ...
