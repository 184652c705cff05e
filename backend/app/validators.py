"""
Разбор и валидация тела комментария.
Функции возвращают (value/ok, error_message) вместо исключений.
"""
import json
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictStr, ValidationError

INVALID_JSON = "Invalid JSON"
FIELDS_REQUIRED = "Name and message are required"


class CommentBody(BaseModel):
    name: StrictStr = Field(..., min_length=1)
    message: StrictStr = Field(..., min_length=1)


def parse_json_object(raw: bytes | str | None) -> tuple[Optional[dict[str, Any]], Optional[str]]:
    """Возвращает (data, error_message). Верхний уровень должен быть объектом."""
    if raw is None:
        return None, INVALID_JSON
    try:
        data = json.loads(raw)
    except (ValueError, TypeError):
        return None, INVALID_JSON
    if not isinstance(data, dict):
        return None, INVALID_JSON
    return data, None


def validate_comment(data: dict[str, Any]) -> tuple[Optional[CommentBody], Optional[str]]:
    """name и message обязательны: непустые строки. Лишние поля игнорируются."""
    try:
        return CommentBody.model_validate(data), None
    except ValidationError:
        return None, FIELDS_REQUIRED
