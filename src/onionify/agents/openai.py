"""OpenAI chat-completions implementation of the Agent protocol."""

from openai import OpenAI
from pydantic import BaseModel

from onionify.logger import get_logger

DEFAULT_MODEL = "gpt-4o-mini"

logger = get_logger(__name__)


class OpenAIAgent:
    """Agent backed by OpenAI's chat completions API."""

    def __init__(self, model: str = DEFAULT_MODEL, api_key: str | None = None) -> None:
        self._model = model
        self._client = OpenAI(api_key=api_key) if api_key else OpenAI()

    def ask(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema: type[BaseModel] | None = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ) -> str:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs = {}
        if schema is not None:
            kwargs["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": schema.__name__.lower(),
                    "schema": schema.response_schema(),
                    "strict": True,
                },
            }

        logger.debug("Calling %s (structured=%s)", self._model, schema is not None)
        response = self._client.chat.completions.create(
            model=self._model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
            **kwargs,
        )
        return response.choices[0].message.content or ""
