from memshortener.dao.base import ShortURLBaseDAO
from memshortener.dao.memory import ShortURLMemoryDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
]
