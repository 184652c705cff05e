"""
POST /api/comments: приём комментария гостевой книги.
Порядок: метод → лимит по источнику → разбор/валидация → фильтр → запись.
Ошибки отдаются plain text, успех отдаётся как JSON {"success": true, "id": ...}.
"""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from app import config
from app.client_ip import get_source_id
from app.comment_service import submit_comment
from app.rate_limit import check_comment_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["comments"])

RATE_LIMITED = "Slow down! You are sending messages too quickly."

_STATUS_BY_CODE = {
    "INVALID_JSON": 400,
    "VALIDATION_ERROR": 400,
    "INAPPROPRIATE_CONTENT": 400,
    "STORAGE_NOT_CONFIGURED": 500,
    "STORAGE_ERROR": 500,
}


@router.post("/api/comments")
async def add_comment(request: Request):
    source = get_source_id(request)
    allowed, retry_after = check_comment_rate_limit(source, config.COMMENT_COOLDOWN_SECONDS)
    if not allowed:
        logger.info("Comment rate limit hit, retry_after=%s", retry_after)
        return PlainTextResponse(RATE_LIMITED, status_code=429, headers={"Retry-After": str(retry_after)})

    raw_body = await request.body()
    # pymongo блокирующий, запись идёт в threadpool
    result = await run_in_threadpool(submit_comment, raw_body)
    if result.get("success"):
        return JSONResponse({"success": True, "id": result["id"]})
    status_code = _STATUS_BY_CODE.get(result.get("code"), 500)
    return PlainTextResponse(result.get("detail", "Error"), status_code=status_code)

