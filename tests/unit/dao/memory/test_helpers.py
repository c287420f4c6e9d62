"""Unit tests for the synchronized decorator in dao/memory/helpers.py.

Test coverage includes:

1. The wrapped method runs while holding the instance lock.
2. The lock is released when the wrapped method raises.
3. functools.wraps metadata is preserved.
"""

import threading

import pytest

from linkshortener.dao.memory.helpers import synchronized


class _Store:
    def __init__(self):
        self.lock = threading.RLock()

    @synchronized
    def owned(self):
        """Report whether another thread is locked out."""
        acquired = []
        thread = threading.Thread(target=lambda: acquired.append(self.lock.acquire(blocking=False)))
        thread.start()
        thread.join()
        return not acquired[0]

    @synchronized
    def fail(self):
        raise RuntimeError('boom')


def test_synchronized_holds_lock():
    store = _Store()
    assert store.owned() is True
    assert store.lock.acquire(blocking=False)
    store.lock.release()


def test_synchronized_releases_lock_on_error():
    store = _Store()
    with pytest.raises(RuntimeError, match='boom'):
        store.fail()
    assert store.lock.acquire(blocking=False)
    store.lock.release()


def test_synchronized_preserves_metadata():
    assert _Store.owned.__name__ == 'owned'
    assert _Store.owned.__doc__ == 'Report whether another thread is locked out.'
