"""Tests for onionify.tasks.onionify."""

import logging

import pytest

from conftest import FakeAgent
from onionify.exceptions import StepFailedError
from onionify.models import Article
from onionify.tasks.onionify import onionify_article, parse_satirical_response


@pytest.fixture
def article() -> Article:
    return Article(title="Cats Adopt Shelter", body="A shelter was adopted.", author="Jane Doe")


class TestParseSatiricalResponse:
    def test_splits_title_and_body(self, article: Article) -> None:
        result = parse_satirical_response(
            "Title: Cats Declare War\nBody line one\nBody line two", article
        )

        assert result == Article(
            title="Cats Declare War",
            body="Body line one\nBody line two",
            author="Parodied version of Jane Doe",
        )

    def test_unknown_author(self) -> None:
        original = Article(title="T", body="B")
        result = parse_satirical_response("Headline\nBody", original)
        assert result.author == "Parodied version of Unknown"

    def test_title_without_label(self, article: Article) -> None:
        result = parse_satirical_response("Local Man Wins\n\nHe won.\n", article)
        assert result.title == "Local Man Wins"
        assert result.body == "He won."

    def test_single_line_has_empty_body(self, article: Article) -> None:
        result = parse_satirical_response("Title: Only A Headline", article)
        assert result.title == "Only A Headline"
        assert result.body == ""

    def test_preamble_becomes_title(self, article: Article) -> None:
        # naive first-line split is kept as-is
        result = parse_satirical_response(
            "Here is your article:\nTitle: Real Headline\nBody", article
        )
        assert result.title == "Here is your article:"
        assert result.body == "Title: Real Headline\nBody"


class TestOnionifyArticle:
    def test_rewrites_with_freeform_call(self, article: Article) -> None:
        agent = FakeAgent(response="Title: Cats Seize Means Of Adoption\nMeow.")

        result = onionify_article(article, agent)

        assert result.title == "Cats Seize Means Of Adoption"
        assert result.body == "Meow."
        assert result.author == "Parodied version of Jane Doe"

        call = agent.calls[0]
        assert call["schema"] is None
        assert call["temperature"] == 0.7
        assert call["max_tokens"] == 2000
        assert "Title: Cats Adopt Shelter" in call["prompt"]
        assert "Body: A shelter was adopted." in call["prompt"]
        assert "Author: Jane Doe" in call["prompt"]
        assert "The Onion" in call["system"]

    def test_original_is_not_mutated(self, article: Article) -> None:
        onionify_article(article, FakeAgent(response="New\nBody"))
        assert article.title == "Cats Adopt Shelter"
        assert article.author == "Jane Doe"

    def test_agent_error_is_wrapped(self, article: Article) -> None:
        cause = TimeoutError("read timed out")

        with pytest.raises(StepFailedError, match="Failed to onionify article.") as exc_info:
            onionify_article(article, FakeAgent(error=cause))

        assert exc_info.value.__cause__ is cause

    def test_agent_error_is_logged(self, article: Article, caplog) -> None:
        cause = TimeoutError("read timed out")

        with caplog.at_level(logging.ERROR, logger="onionify"):
            with pytest.raises(StepFailedError):
                onionify_article(article, FakeAgent(error=cause))

        [record] = caplog.records
        assert record.name == "onionify.tasks.onionify"
        assert record.exc_info[1] is cause
