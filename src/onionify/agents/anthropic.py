"""Anthropic/Claude implementation of the Agent protocol."""

import json

from anthropic import Anthropic
from pydantic import BaseModel

from onionify.logger import get_logger

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"

logger = get_logger(__name__)


class AnthropicAgent:
    """Agent backed by Anthropic's Claude API.

    Structured output is requested by forcing a single tool whose input schema
    is the response model; the tool input is returned as a JSON string.
    """

    def __init__(self, model: str = DEFAULT_MODEL, api_key: str | None = None) -> None:
        self._model = model
        self._client = Anthropic(api_key=api_key) if api_key else Anthropic()

    def ask(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema: type[BaseModel] | None = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ) -> str:
        kwargs = {}
        if system:
            kwargs["system"] = system
        if schema is not None:
            tool_name = schema.__name__.lower()
            kwargs["tools"] = [
                {
                    "name": tool_name,
                    "description": f"Record the extracted {tool_name}.",
                    "input_schema": schema.response_schema(),
                }
            ]
            kwargs["tool_choice"] = {"type": "tool", "name": tool_name}

        logger.debug("Calling %s (structured=%s)", self._model, schema is not None)
        response = self._client.messages.create(
            model=self._model,
            max_tokens=max_tokens,
            temperature=temperature,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )

        for block in response.content:
            if schema is not None and block.type == "tool_use":
                return json.dumps(block.input)
        return "".join(block.text for block in response.content if block.type == "text")
