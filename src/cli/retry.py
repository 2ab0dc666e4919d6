"""Retry policy for Hacker News API calls."""

import logging

import httpx
import structlog
from tenacity import before_sleep_log, retry, retry_if_exception, stop_after_attempt, wait_exponential

logger = structlog.stdlib.get_logger(__name__)

RETRY_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_transient(exc: BaseException) -> bool:
    """Network failures, throttling and server errors. Other 4xx responses are final."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in RETRY_STATUS_CODES
    return isinstance(exc, httpx.RequestError)


def http_retry(max_attempts: int = 3, min_wait: float = 2.0, max_wait: float = 10.0):
    """Retry decorator for HTTP calls that may fail transiently.

    Args:
        max_attempts: Total attempts, including the first
        min_wait: Min backoff between attempts (seconds)
        max_wait: Max backoff between attempts (seconds)
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception(is_transient),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
