"""In-memory URL shortener service with expiring links and click tracking."""

__version__ = '1.0.0'
