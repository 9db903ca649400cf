"""Extraction prompts and logic: markdown to a structured Article."""

import json

from pydantic import ValidationError
from rich.console import Console

from onionify.agent import Agent
from onionify.exceptions import SchemaValidationError, StepFailedError
from onionify.logger import get_logger
from onionify.models import Article

PROMPT = """\
From the provided markdown string, extract the features required by the response \
format. Stick as close as possible to the provided schema.
{markdown}"""

SYSTEM_PROMPT = (
    "You are a data entry operator whose job is to extract certain features "
    "from a piece of text."
)

TEMPERATURE = 0.7
MAX_TOKENS = 2000

console = Console()
logger = get_logger(__name__)


def parse_article(raw: str) -> Article:
    """Parse model output into an Article.

    Raises:
        json.JSONDecodeError: If ``raw`` is not JSON at all.
        SchemaValidationError: If the JSON doesn't match the Article shape.
    """
    data = json.loads(raw)
    try:
        return Article.model_validate(data)
    except ValidationError as e:
        raise SchemaValidationError(raw, str(e)) from e


def extract_article(markdown: str, agent: Agent) -> Article:
    """Extract title, body, and author from scraped article markdown."""
    try:
        with console.status("Getting article information from markdown..."):
            raw = agent.ask(
                PROMPT.format(markdown=markdown),
                system=SYSTEM_PROMPT,
                schema=Article,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
            article = parse_article(raw)
    except SchemaValidationError as e:
        console.print("❌ Could not get article info from markdown")
        logger.error("Model output failed validation: %s", e.detail)
        raise
    except Exception as e:
        console.print("❌ Could not get article info from markdown")
        logger.exception("Error extracting article features")
        raise StepFailedError() from e

    console.print("✅ Got article information from markdown")
    return article
