"""Scrape an article URL to markdown and hand it to extraction."""

import time

from rich.console import Console

from onionify.agent import Agent
from onionify.exceptions import (
    ScrapeEmptyResultError,
    ScrapeJobFailedError,
    ScrapeTimeoutError,
)
from onionify.logger import get_logger
from onionify.models import Article, ScrapeStatus
from onionify.scraper import Scraper
from onionify.tasks.extract import extract_article

MAX_CHECKS = 5
POLL_INTERVAL = 1.0

console = Console()
logger = get_logger(__name__)


def fetch_markdown(
    url: str,
    scraper: Scraper,
    *,
    max_checks: int = MAX_CHECKS,
    poll_interval: float = POLL_INTERVAL,
) -> str:
    """Submit a scrape job for ``url`` and poll until it yields markdown.

    Polls at most ``max_checks`` times, sleeping ``poll_interval`` seconds
    after every non-terminal status.

    Raises:
        ScrapeJobFailedError: The service reported the job as failed.
        ScrapeEmptyResultError: The job completed without markdown.
        ScrapeTimeoutError: The job was still running after ``max_checks`` polls.
    """
    job_id = None
    try:
        with console.status("Getting markdown features for article..."):
            job_id = scraper.start(url)
            for check in range(1, max_checks + 1):
                job = scraper.get(job_id)
                logger.debug("Job %s check %d/%d: %s", job_id, check, max_checks, job.status.value)

                if not job.is_terminal:
                    time.sleep(poll_interval)
                    continue
                if job.status == ScrapeStatus.FAILED:
                    raise ScrapeJobFailedError(job.error or "Scrape job failed")
                if not job.markdown:
                    raise ScrapeEmptyResultError(
                        "Got no markdown when scraping the article. Please check the URL."
                    )
                break
            else:
                raise ScrapeTimeoutError(
                    "Exceeded maximum checks for getting markdown for article."
                )
    except Exception:
        console.print("❌ Failed in getting markdown from article")
        logger.exception("Could not get article %s (job %s)", url, job_id)
        raise

    console.print("✅ Succeeded in getting markdown from article")
    return job.markdown


def scrape_article(
    url: str,
    scraper: Scraper,
    agent: Agent,
    *,
    max_checks: int = MAX_CHECKS,
    poll_interval: float = POLL_INTERVAL,
) -> Article:
    """Scrape ``url`` and extract a structured Article from its markdown."""
    markdown = fetch_markdown(
        url, scraper, max_checks=max_checks, poll_interval=poll_interval
    )
    return extract_article(markdown, agent)
