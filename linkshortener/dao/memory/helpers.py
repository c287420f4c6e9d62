import functools


__all__ = []


def synchronized[F](method: F) -> F:
    """Serialize in-memory DAO methods through the DAO's re-entrant lock

    Args:
        method (Callable[..., Any]):
            DAO method reading or mutating the in-memory maps.

    Returns:
        Callable[..., Any]:
            Wrapped method which holds `self.lock` for the whole call.

    Example:
        >>> @synchronized
        ... def count(self):
        ...     return len(self.short_urls)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self.lock:
            return method(self, *args, **kwargs)

    return wrapper
