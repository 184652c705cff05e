"""
Фильтр содержимого комментариев.
ContentFilter.is_allowed(text) задаёт интерфейс, SubstringFilter даёт наивную
реализацию по умолчанию: подстрока без учёта границ слов, так что совпадения
внутри длинных слов тоже отсекаются.
"""
import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Iterable

from app import config

logger = logging.getLogger(__name__)

INAPPROPRIATE_CONTENT = "Your message contains inappropriate words."


class ContentFilter(ABC):
    @abstractmethod
    def is_allowed(self, text: str) -> bool:
        """True, если текст можно сохранить."""


class SubstringFilter(ContentFilter):
    def __init__(self, words: Iterable[str]):
        self._words = frozenset(w.strip().lower() for w in words if w and w.strip())

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def is_allowed(self, text: str) -> bool:
        lowered = text.lower()
        return not any(word in lowered for word in self._words)


def load_bad_words_file(path: str) -> list[str]:
    """Одно слово на строку; пустые строки и строки с # пропускаются."""
    words = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        s = line.strip()
        if s and not s.startswith("#"):
            words.append(s)
    return words


def bad_words_from_config() -> list[str]:
    if config.BAD_WORDS_FILE:
        words = load_bad_words_file(config.BAD_WORDS_FILE)
        logger.info("Loaded %d bad words from %s", len(words), config.BAD_WORDS_FILE)
        return words
    if config.BAD_WORDS:
        return config.BAD_WORDS.split(",")
    return list(config.DEFAULT_BAD_WORDS)


@lru_cache(maxsize=1)
def get_content_filter() -> ContentFilter:
    return SubstringFilter(bad_words_from_config())
