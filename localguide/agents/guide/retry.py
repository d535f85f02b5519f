"""
Bounded exponential-backoff retry around a single model call.

Only transient overload (HTTP 503 from the provider) is retried. Any other
error propagates on the first attempt. The loop is an explicit state machine:

    ATTEMPTING -> SUCCEEDED   provider returned text
    ATTEMPTING -> WAITING     503 and attempts remain
    WAITING    -> ATTEMPTING  after the delay (1s, 2s, 4s, ...)
    ATTEMPTING -> FAILED      non-503 error, or 503 on the last attempt
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from google.genai import errors as genai_errors

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_INITIAL_DELAY_MS = 1000

OVERLOAD_STATUS_CODE = 503

GenerateFn = Callable[[str], Awaitable[str]]
SleepFn = Callable[[float], Awaitable[None]]


class RetryState(str, Enum):
    ATTEMPTING = "ATTEMPTING"
    WAITING = "WAITING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"


def is_transient_overload(error: BaseException) -> bool:
    """
    Check if an error means "model overloaded, try again later".

    SDK errors carry the HTTP status in ``code``; anything else is recognized
    by a "503" in its message.
    """
    if isinstance(error, genai_errors.APIError):
        return error.code == OVERLOAD_STATUS_CODE
    return str(OVERLOAD_STATUS_CODE) in str(error)


async def generate_with_retry(
    generate: GenerateFn,
    prompt: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    initial_delay_ms: int = DEFAULT_INITIAL_DELAY_MS,
    sleep: SleepFn = asyncio.sleep,
) -> str:
    """
    Call ``generate(prompt)`` with retries on transient overload.

    Args:
        generate: Coroutine function performing one model call
        prompt: Full prompt text
        max_attempts: Total attempts, including the first one
        initial_delay_ms: First backoff delay, doubled after every wait
        sleep: Awaitable sleep (injected by tests)

    Returns:
        The generated text

    Raises:
        The provider error from the failing attempt
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    state = RetryState.ATTEMPTING
    attempt = 0
    delay_ms = initial_delay_ms
    result: Optional[str] = None
    last_error: Optional[Exception] = None

    while state not in (RetryState.SUCCEEDED, RetryState.FAILED):
        if state is RetryState.ATTEMPTING:
            attempt += 1
            try:
                result = await generate(prompt)
                state = RetryState.SUCCEEDED
            except Exception as e:
                last_error = e
                if not is_transient_overload(e):
                    state = RetryState.FAILED
                elif attempt >= max_attempts:
                    logger.error(
                        f"AI model is still overloaded after {max_attempts} attempts. Giving up."
                    )
                    state = RetryState.FAILED
                else:
                    logger.warning(
                        f"AI model is overloaded (503). Retrying in {delay_ms / 1000:g}s... "
                        f"(Attempt {attempt}/{max_attempts})"
                    )
                    state = RetryState.WAITING
        else:
            await sleep(delay_ms / 1000)
            delay_ms *= 2
            state = RetryState.ATTEMPTING

    if state is RetryState.FAILED:
        assert last_error is not None
        raise last_error

    assert result is not None
    return result
