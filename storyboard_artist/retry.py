"""
Resilient call executor - retries rate-limited calls with exponential backoff.
"""

from __future__ import annotations
import asyncio
import enum
from typing import Awaitable, Callable, Optional, TypeVar

from .config import DEFAULT_INITIAL_DELAY, DEFAULT_MAX_ATTEMPTS
from .errors import RetryExhaustedError, TransientError
from .utils import get_logger

logger = get_logger("retry")

T = TypeVar("T")

RATE_LIMIT_MARKERS = ('"code":429', "RESOURCE_EXHAUSTED")


class ErrorKind(enum.Enum):
    TRANSIENT = "transient"
    TERMINAL = "terminal"


def classify_error(exc: BaseException) -> ErrorKind:
    """
    Decide whether a failure is worth retrying.

    Structured signals win: TransientError, or an API error exposing
    code 429 / status RESOURCE_EXHAUSTED (google.genai.errors.APIError does).
    Otherwise the message text is searched for the same markers; an error
    that surfaces neither is treated as terminal.
    """
    if isinstance(exc, TransientError):
        return ErrorKind.TRANSIENT
    if getattr(exc, "code", None) == 429 or getattr(exc, "status", None) == "RESOURCE_EXHAUSTED":
        return ErrorKind.TRANSIENT
    message = str(exc)
    if any(marker in message for marker in RATE_LIMIT_MARKERS):
        return ErrorKind.TRANSIENT
    return ErrorKind.TERMINAL


async def run_with_backoff(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay: float = DEFAULT_INITIAL_DELAY,
    *,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    label: Optional[str] = None,
) -> T:
    """
    Run an async operation, retrying transient failures with exponential backoff.

    Args:
        operation: Zero-argument callable returning an awaitable
        max_attempts: Ceiling on total attempts
        initial_delay: Seconds to wait before the second attempt; doubles each retry
        sleep: Awaitable sleep function (injectable for tests)
        label: Name used in log lines

    Returns:
        The operation's result

    Raises:
        The operation's own exception for terminal failures, unchanged.
        RetryExhaustedError if every attempt failed transiently.
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    name = label or getattr(operation, "__name__", "operation")
    last_error: Optional[BaseException] = None

    for attempt in range(max_attempts):
        try:
            return await operation()
        except Exception as exc:
            if classify_error(exc) is ErrorKind.TERMINAL:
                raise
            last_error = exc
            if attempt + 1 >= max_attempts:
                break
            delay = initial_delay * (2 ** attempt)
            logger.warning(
                f"Rate limit hit on {name}. Retrying in {delay:g}s... "
                f"(Attempt {attempt + 1}/{max_attempts})"
            )
            await sleep(delay)

    logger.error(f"{name} failed after {max_attempts} attempts: {last_error}")
    raise RetryExhaustedError(max_attempts, last_error) from last_error
