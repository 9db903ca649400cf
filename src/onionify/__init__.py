"""onionify - scrape a news article and rewrite it as satire."""

__version__ = "1.0.0"
