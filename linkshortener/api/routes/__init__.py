from linkshortener.api.routes import health, shorturls, redirect


__all__ = [
    'health',
    'shorturls',
    'redirect',
]
