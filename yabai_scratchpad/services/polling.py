"""Wait for a query to produce a value, bounded by a deadline."""

import logging
import time
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_POLL_INTERVAL = 0.1


def wait_for(
    query: Callable[[], Optional[T]],
    timeout: float,
    interval: float = DEFAULT_POLL_INTERVAL,
    started_at: Optional[float] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> Optional[T]:
    """
    Call query until it returns something other than None.

    Args:
        query: Produces the awaited value, or None while it is not there yet
        timeout: Seconds after start before giving up
        interval: Seconds to sleep between attempts
        started_at: clock() reading to measure the timeout from (defaults to now)
        clock: Monotonic time source
        sleep: Sleep function

    Returns:
        First non-None result, or None if the deadline passed first
    """
    start = clock() if started_at is None else started_at
    attempts = 0

    while True:
        attempts += 1
        result = query()
        if result is not None:
            logger.debug(f"Condition met after {attempts} attempt(s)")
            return result

        if clock() - start > timeout:
            logger.debug(f"Gave up after {attempts} attempt(s) ({timeout}s timeout)")
            return None

        sleep(interval)
