"""Простой лимит комментариев по источнику: одна принятая отправка за окно cooldown.

Состояние живёт в памяти процесса и сбрасывается при перезапуске; у каждого
воркера своя копия.
"""
import math
import threading
import time

# source -> timestamp последней принятой отправки
_comment_submits: dict[str, float] = {}
_lock = threading.Lock()

_clock = time.time


def _check_cooldown(store: dict[str, float], key: str, cooldown: float) -> tuple[bool, int]:
    # Проверка и запись под одним локом: два параллельных запроса не проскочат оба.
    with _lock:
        now = _clock()
        last = store.get(key, 0.0)
        elapsed = now - last
        if elapsed < cooldown:
            retry_after = math.ceil(cooldown - elapsed)
            return False, max(1, retry_after)
        store[key] = now
        return True, 0


def check_comment_rate_limit(source: str, cooldown: float) -> tuple[bool, int]:
    """Вернуть (allowed, retry_after). При allowed=True отправка уже засчитана."""
    return _check_cooldown(_comment_submits, source, cooldown)


def last_accepted_at(source: str) -> float | None:
    """Время последней принятой отправки, для диагностики и тестов; не меняет состояние."""
    with _lock:
        return _comment_submits.get(source)


def reset_rate_limits() -> None:
    """Очистить состояние (тесты, ручной сброс)."""
    with _lock:
        _comment_submits.clear()
