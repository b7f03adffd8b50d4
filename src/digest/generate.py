"""Generative-text capability backed by a PydanticAI agent."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from pydantic_ai import Agent

from src.digest.errors import GenerationError

logger = logging.getLogger(__name__)

# A prompt goes in, generated text comes out. Output is non-deterministic:
# the same prompt may yield textually different results.
TextGenerator = Callable[[str], Awaitable[str]]


def _usage_extra(result: Any) -> dict[str, int]:
    usage = result.usage()
    return {
        "input_tokens": usage.input_tokens or 0,
        "output_tokens": usage.output_tokens or 0,
    }


class AgentTextGenerator:
    """Runs a single-shot prompt through ``pydantic_ai.Agent``.

    Any provider failure, an expired deadline, or an empty response is
    raised as ``GenerationError``. No retries are attempted.
    """

    def __init__(self, model: str, *, timeout: float = 60.0) -> None:
        self._model = model
        self._timeout = timeout

    @property
    def model(self) -> str:
        return self._model

    async def __call__(self, prompt: str) -> str:
        try:
            agent = Agent(self._model)
            result = await asyncio.wait_for(agent.run(prompt), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise GenerationError("generation", f"timed out after {self._timeout}s") from exc
        except Exception as exc:
            raise GenerationError("generation", exc) from exc

        output = result.output
        if not isinstance(output, str) or not output.strip():
            raise GenerationError("generation", "empty response")

        logger.debug(
            "generation completed",
            extra={"model": self._model, "output_chars": len(output), **_usage_extra(result)},
        )
        return output
