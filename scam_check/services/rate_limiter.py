import logging
import threading
import time
from typing import Callable

from ..errors import RateLimited

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Process-wide single-slot limiter: at most one accepted request per `delay` seconds.

    State lives in this object, one instance per application. It is not shared
    across worker processes or hosts, so it only sheds bursts on a single
    instance.
    """

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.delay = delay
        self._clock = clock
        self._last_accepted: float | None = None
        self._lock = threading.Lock()

    def acquire(self) -> None:
        with self._lock:
            now = self._clock()
            if self._last_accepted is not None and now - self._last_accepted < self.delay:
                logger.info("Rejected request %.3fs after the last accepted one", now - self._last_accepted)
                raise RateLimited()
            self._last_accepted = now

    def reset(self) -> None:
        with self._lock:
            self._last_accepted = None
