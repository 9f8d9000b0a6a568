"""Retry with exponential backoff.

Usage:
    from status_page.utils.retry import retry_with_backoff

    @retry_with_backoff(max_retries=3, exceptions=(requests.RequestException,))
    def post_alert(url, payload):
        return requests.post(url, json=payload)
"""

import logging
import time
from functools import wraps
from typing import Callable, Iterator, Optional, Tuple, Type, TypeVar

T = TypeVar('T')


def backoff_delays(
    retries: int,
    initial_delay: float = 1.0,
    backoff_factor: float = 2.0,
    max_delay: float = 60.0,
) -> Iterator[float]:
    """Yield the sleep before each retry, growing by ``backoff_factor`` up to ``max_delay``."""
    delay = initial_delay
    for _ in range(retries):
        yield delay
        delay = min(delay * backoff_factor, max_delay)


def retry_with_backoff(
    max_retries: int = 3,
    backoff_factor: float = 2.0,
    initial_delay: float = 1.0,
    max_delay: float = 60.0,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
    on_retry: Optional[Callable[[Exception, int], None]] = None,
) -> Callable:
    """Decorator that retries a function on the given exceptions.

    The function is called up to ``max_retries + 1`` times. The last
    failure is logged and re-raised.

    Args:
        max_retries: Retries after the first attempt
        backoff_factor: Multiplier applied to the delay after each retry
        initial_delay: Seconds to sleep before the first retry
        max_delay: Upper bound for the delay
        exceptions: Exception types that trigger a retry
        on_retry: Called as on_retry(exception, attempt) before each sleep,
            with attempt counting from 0
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            logger = logging.getLogger(func.__module__)
            delays = backoff_delays(max_retries, initial_delay, backoff_factor, max_delay)

            for attempt, delay in enumerate(delays):
                try:
                    return func(*args, **kwargs)
                except exceptions as e:
                    logger.warning(
                        f"{func.__name__} attempt {attempt + 1}/{max_retries + 1} failed: {e}. "
                        f"Retrying in {delay:.1f}s..."
                    )
                    if on_retry:
                        on_retry(e, attempt)
                    time.sleep(delay)

            try:
                return func(*args, **kwargs)
            except exceptions as e:
                logger.error(f"{func.__name__} failed after {max_retries + 1} attempts: {e}")
                raise

        return wrapper
    return decorator
