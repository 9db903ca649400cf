"""Article model and the transient scrape job record."""

import dataclasses
from enum import Enum

from pydantic import BaseModel


class Article(BaseModel):
    """A news article, either the original or its satirical rewrite."""

    title: str
    body: str
    author: str | None = None

    @classmethod
    def response_schema(cls) -> dict:
        """Strict JSON schema for structured-output requests.

        Every property is required and ``author`` is nullable instead of optional.
        """
        schema = cls.model_json_schema()
        for prop in schema["properties"].values():
            prop.pop("default", None)
        schema["required"] = list(schema["properties"])
        schema["additionalProperties"] = False
        return schema


class ScrapeStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclasses.dataclass
class ScrapeJob:
    """Snapshot of a scrape job as last reported by the scrape service."""

    job_id: str
    status: ScrapeStatus
    markdown: str | None = None
    error: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in (ScrapeStatus.COMPLETED, ScrapeStatus.FAILED)
