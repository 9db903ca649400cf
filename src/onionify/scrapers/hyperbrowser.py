"""Scraper for arbitrary article pages using Hyperbrowser scrape jobs."""

from hyperbrowser import Hyperbrowser
from hyperbrowser.models import CreateSessionParams, StartScrapeJobParams

from onionify.logger import get_logger
from onionify.models import ScrapeJob, ScrapeStatus

logger = get_logger(__name__)


class HyperbrowserScraper:
    """Submit and poll Hyperbrowser scrape jobs that return page markdown."""

    def __init__(self, api_key: str | None = None) -> None:
        self._client = Hyperbrowser(api_key=api_key)

    def start(self, url: str) -> str:
        # proxy and captcha solving are always off
        params = StartScrapeJobParams(
            url=url,
            session_options=CreateSessionParams(use_proxy=False, solve_captchas=False),
        )
        response = self._client.scrape.start(params)
        logger.info("Started scrape job %s for %s", response.job_id, url)
        return response.job_id

    def get(self, job_id: str) -> ScrapeJob:
        response = self._client.scrape.get(job_id)
        markdown = response.data.markdown if response.data else None
        return ScrapeJob(
            job_id=job_id,
            status=ScrapeStatus(response.status),
            markdown=markdown,
            error=response.error,
        )
