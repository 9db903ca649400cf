"""Shared fakes for the Agent and Scraper protocols."""

from __future__ import annotations

import logging

import pytest

from onionify.models import ScrapeJob, ScrapeStatus


class FakeAgent:
    def __init__(self, response: str = "", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    def ask(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema=None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ) -> str:
        self.calls.append(
            {
                "prompt": prompt,
                "system": system,
                "schema": schema,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response


class FakeScraper:
    """Replays a fixed sequence of job snapshots; the last one repeats."""

    def __init__(self, jobs: list[ScrapeJob]) -> None:
        self.jobs = jobs
        self.started: list[str] = []
        self.checks = 0

    def start(self, url: str) -> str:
        self.started.append(url)
        return "job-1"

    def get(self, job_id: str) -> ScrapeJob:
        job = self.jobs[min(self.checks, len(self.jobs) - 1)]
        self.checks += 1
        return job


def make_job(
    status: ScrapeStatus, markdown: str | None = None, error: str | None = None
) -> ScrapeJob:
    return ScrapeJob(job_id="job-1", status=status, markdown=markdown, error=error)


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record poll sleeps instead of waiting."""
    from onionify.tasks import scrape as scrape_module

    recorded: list[float] = []
    monkeypatch.setattr(scrape_module.time, "sleep", recorded.append)
    return recorded


@pytest.fixture(autouse=True)
def propagate_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    """Let caplog see onionify records even after the CLI configured logging."""
    monkeypatch.setattr(logging.getLogger("onionify"), "propagate", True)
