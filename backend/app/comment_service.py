"""
Приём комментария гостевой книги: разбор JSON, проверка полей, фильтр
содержимого, запись в MongoDB.
Лимит по источнику проверяется раньше, в роутере: сюда доходят только
засчитанные отправки.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from pymongo.errors import PyMongoError

from app.content_filter import INAPPROPRIATE_CONTENT, ContentFilter, get_content_filter
from app.db import StorageNotConfigured, get_comments_collection
from app.validators import parse_json_object, validate_comment

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "Database connection not configured."
DATABASE_ERROR = "Database error"


def _store_comment(name: str, message: str) -> dict[str, Any]:
    doc = {
        "name": name,
        "message": message,
        "createdAt": datetime.now(timezone.utc),
    }
    try:
        with get_comments_collection() as collection:
            result = collection.insert_one(doc)
    except StorageNotConfigured:
        logger.error("Comment not stored: MONGO_URI is not set")
        return {"success": False, "detail": NOT_CONFIGURED, "code": "STORAGE_NOT_CONFIGURED"}
    except PyMongoError:
        logger.exception("Comment insert failed")
        return {"success": False, "detail": DATABASE_ERROR, "code": "STORAGE_ERROR"}
    comment_id = str(result.inserted_id)
    logger.info("Comment: stored id=%s", comment_id)
    return {"success": True, "id": comment_id}


def submit_comment(
    raw_body: bytes | str | None,
    content_filter: Optional[ContentFilter] = None,
) -> dict[str, Any]:
    """
    Обработать тело запроса. Возвращает dict: success и id либо
    success=False с detail и code (INVALID_JSON, VALIDATION_ERROR,
    INAPPROPRIATE_CONTENT, STORAGE_NOT_CONFIGURED, STORAGE_ERROR).
    """
    data, err = parse_json_object(raw_body)
    if err:
        return {"success": False, "detail": err, "code": "INVALID_JSON"}

    body, err = validate_comment(data)
    if err:
        return {"success": False, "detail": err, "code": "VALIDATION_ERROR"}

    policy = content_filter or get_content_filter()
    if not policy.is_allowed(body.message):
        return {"success": False, "detail": INAPPROPRIATE_CONTENT, "code": "INAPPROPRIATE_CONTENT"}

    return _store_comment(body.name, body.message)
