"""Satirical rewrite prompts and logic."""

from rich.console import Console

from onionify.agent import Agent
from onionify.exceptions import StepFailedError
from onionify.logger import get_logger
from onionify.models import Article

TEMPLATE = """\
Rewrite the following article as if it were written for a satirical news website \
like The Onion.
Use humor, irony, and exaggeration to transform the content while trying to stick \
closely to the original intent of the article:

Title: {title}
Body: {body}
Author: {author}

Make sure the headline is absurd or humorous, and add funny commentary in the body.
"""

SYSTEM_PROMPT = (
    "You are a humorous and satirical writer writing for the online newspaper "
    "`The Onion`."
)

TEMPERATURE = 0.7
MAX_TOKENS = 2000

console = Console()
logger = get_logger(__name__)


def parse_satirical_response(text: str, original: Article) -> Article:
    """Split a freeform response into a new Article.

    The first line is the title (with a leading ``Title:`` label dropped) and
    everything after it is the body. Multi-line titles or preambles mis-parse.
    """
    lines = text.split("\n")
    title = lines[0].replace("Title:", "", 1).strip()
    body = "\n".join(lines[1:]).strip()
    return Article(
        title=title,
        body=body,
        author=f"Parodied version of {original.author or 'Unknown'}",
    )


def onionify_article(article: Article, agent: Agent) -> Article:
    """Rewrite ``article`` as satire. The input article is left untouched."""
    prompt = TEMPLATE.format(
        title=article.title,
        body=article.body,
        author=article.author or "Unknown",
    )
    try:
        with console.status("Onionifying article..."):
            response = agent.ask(
                prompt,
                system=SYSTEM_PROMPT,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
            result = parse_satirical_response(response, article)
    except Exception as e:
        console.print("❌ Could not onionify article")
        logger.exception("Error generating satirical content")
        raise StepFailedError() from e

    console.print("✅ Successfully onionified article")
    return result
