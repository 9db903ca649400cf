"""Runtime configuration read from the environment."""

import dataclasses
import os
from enum import Enum

from onionify.exceptions import MissingCredentialError


class Provider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


# env var and missing-key label per language-model provider
LLM_KEYS = {
    Provider.OPENAI: ("OPENAI_API_KEY", "Open AI"),
    Provider.ANTHROPIC: ("ANTHROPIC_API_KEY", "Anthropic"),
}
HYPERBROWSER_KEY = "HYPERBROWSER_API_KEY"
LOG_LEVEL_VAR = "ONIONIFY_LOG_LEVEL"


@dataclasses.dataclass(frozen=True)
class Config:
    provider: Provider
    llm_api_key: str
    hyperbrowser_api_key: str
    model: str | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls, provider: Provider = Provider.OPENAI, model: str | None = None
    ) -> "Config":
        """Build a Config from os.environ.

        The language-model key is checked before the scrape key.

        Raises:
            MissingCredentialError: If either required key is unset or empty.
        """
        provider = Provider(provider)
        env_var, label = LLM_KEYS[provider]
        llm_api_key = os.environ.get(env_var)
        if not llm_api_key:
            raise MissingCredentialError(f"Missing {label} API Key")

        hyperbrowser_api_key = os.environ.get(HYPERBROWSER_KEY)
        if not hyperbrowser_api_key:
            raise MissingCredentialError("Missing HyperBrowser API Key")

        return cls(
            provider=provider,
            llm_api_key=llm_api_key,
            hyperbrowser_api_key=hyperbrowser_api_key,
            model=model,
            log_level=os.environ.get(LOG_LEVEL_VAR, "WARNING").upper(),
        )
