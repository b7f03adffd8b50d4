"""Pipeline stages and the stage-transition callback."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)

# Type alias for the stage-transition callback used by the pipeline.
EventCallback = Callable[[str, dict[str, Any]], Coroutine[Any, Any, None]]


class PipelineStage(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    CLEANING = "cleaning"
    STRIPPING = "stripping"
    SUMMARIZING = "summarizing"
    DONE = "done"
    FAILED = "failed"


async def emit_event(
    on_event: EventCallback | None,
    event: str,
    data: dict[str, Any] | None = None,
) -> None:
    """Emit a pipeline event if a callback is registered."""
    if on_event:
        logger.debug("pipeline event emitted", extra={"event": event})
        await on_event(event, data or {})
