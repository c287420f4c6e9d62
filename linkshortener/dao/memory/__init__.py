from linkshortener.dao.memory.mixins import InMemoryStoreMixin
from linkshortener.dao.memory.short_url_memory_dao import ShortURLMemoryDAO


__all__ = [
    'InMemoryStoreMixin',
    'ShortURLMemoryDAO',
]
