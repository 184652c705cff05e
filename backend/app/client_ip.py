"""
Идентификатор источника для rate-limit комментариев.
Сервис работает за прокси, который передаёт адрес клиента в X-Forwarded-For.
Ключ лимита: значение заголовка целиком (без пробелов по краям), включая
цепочку прокси. Starlette ищет заголовки без учёта регистра, так что
x-forwarded-for и X-Forwarded-For равнозначны. Без заголовка все запросы
попадают в одну корзину "unknown".
"""
from __future__ import annotations

from fastapi import Request

UNKNOWN_SOURCE = "unknown"


def get_source_id(request: Request) -> str:
    """Значение X-Forwarded-For или UNKNOWN_SOURCE."""
    forwarded = (request.headers.get("x-forwarded-for") or "").strip()
    return forwarded or UNKNOWN_SOURCE
