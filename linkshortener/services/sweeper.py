"""Background sweep of expired short URLs.

The sweeper runs `ShortURLBaseDAO.sweep()` on a fixed interval from a daemon
thread. It is started and stopped with the HTTP application's lifespan.

Example:
    >>> sweeper = ExpirySweeper(dao, interval_seconds=300)
    >>> sweeper.start()
    >>> ...
    >>> sweeper.stop()
"""

import logging
import threading

from linkshortener.constants import Sweep
from linkshortener.dao.base import ShortURLBaseDAO


logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Periodically purge expired short URLs from a DAO

    Attributes:
        dao (ShortURLBaseDAO):
            Store to sweep.
        interval_seconds (float):
            Delay between two sweeps.
    """

    def __init__(self, dao: ShortURLBaseDAO, interval_seconds: float = Sweep.INTERVAL_SECONDS):
        if interval_seconds <= 0:
            raise ValueError(f'Sweep interval must be positive (given value: {interval_seconds}).')
        self.dao = dao
        self.interval_seconds = interval_seconds
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> int:
        """Sweep once and return the number of purged short URLs (0 on failure)."""
        try:
            return self.dao.sweep()
        except Exception:
            # Next tick retries
            logger.exception('Expired short URL sweep failed.')
            return 0

    def _loop(self) -> None:
        logger.info('Expiry sweeper started.', extra={'interval_seconds': self.interval_seconds})
        while not self._stop_event.wait(self.interval_seconds):
            self.run_once()
        logger.info('Expiry sweeper stopped.')

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name='expiry-sweeper', daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = 5.0) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
