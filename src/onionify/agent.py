"""Agent protocol — the LLM abstraction layer."""

from typing import Protocol, runtime_checkable

from pydantic import BaseModel


@runtime_checkable
class Agent(Protocol):
    def ask(
        self,
        prompt: str,
        *,
        system: str | None = None,
        schema: type[BaseModel] | None = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
    ) -> str: ...
