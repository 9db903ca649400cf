"""Language-model backends implementing the Agent protocol."""

from onionify.agent import Agent
from onionify.config import Provider


def create_agent(provider: Provider, api_key: str, model: str | None = None) -> Agent:
    """Build the agent for ``provider``, falling back to its default model."""
    if provider == Provider.ANTHROPIC:
        from onionify.agents.anthropic import DEFAULT_MODEL, AnthropicAgent

        return AnthropicAgent(model=model or DEFAULT_MODEL, api_key=api_key)

    from onionify.agents.openai import DEFAULT_MODEL, OpenAIAgent

    return OpenAIAgent(model=model or DEFAULT_MODEL, api_key=api_key)
