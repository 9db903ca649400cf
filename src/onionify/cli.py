"""CLI: scrape a news article and onionify it."""

from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown

from onionify import __version__
from onionify.agents import create_agent
from onionify.config import Config, Provider
from onionify.exceptions import MissingCredentialError
from onionify.logger import setup_logging
from onionify.scrapers.hyperbrowser import HyperbrowserScraper
from onionify.tasks.onionify import onionify_article
from onionify.tasks.scrape import scrape_article

app = typer.Typer(
    name="onionify",
    help="Scrape a news article and onionify it.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"onionify {__version__}")
        raise typer.Exit()


@app.command()
def onionify(
    url: Annotated[
        str,
        typer.Argument(help="The URL of the news article to scrape"),
    ],
    provider: Annotated[
        Provider,
        typer.Option(help="Language-model provider"),
    ] = Provider.OPENAI,
    model: Annotated[
        str | None,
        typer.Option(help="Model to use (default: the provider's default model)"),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = None,
) -> None:
    """Scrape a news article and rewrite it in the style of The Onion."""
    load_dotenv()
    try:
        config = Config.from_env(provider=provider, model=model)
    except MissingCredentialError as e:
        err_console.print(f"{e}. Exiting", markup=False, emoji=False, soft_wrap=True)
        raise typer.Exit(code=1)

    setup_logging(config.log_level)
    agent = create_agent(config.provider, config.llm_api_key, model=config.model)
    scraper = HyperbrowserScraper(api_key=config.hyperbrowser_api_key)

    try:
        console.print("Scraping the article...")
        article = scrape_article(url, scraper, agent)

        console.print("\nOriginal Article:")
        console.print(Markdown(f"Title: {article.title}"))

        console.print("Onionifying the article...")
        onionified = onionify_article(article, agent)

        console.print("\n--- Onionified Article ---")
        console.print(Markdown(onionified.title))
        console.print(Markdown(onionified.body))
    except Exception as e:
        err_console.print(f"❌ Error: {e}", markup=False, emoji=False, soft_wrap=True)
        raise typer.Exit(code=1)


def main() -> None:
    app()
