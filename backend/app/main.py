"""
Гостевая книга, Backend.
Точка входа FastAPI. Запуск: uvicorn app.main:app --host 0.0.0.0 --port 8000
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import CORS_ORIGINS, LOG_LEVEL
from app.routers import comments

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

app = FastAPI(
    title="Гостевая книга",
    description="API приёма комментариев",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(comments.router)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_as_text(request: Request, exc: StarletteHTTPException):
    """405 для любого метода отдаётся plain text; Allow берётся из маршрута."""
    if exc.status_code == 405:
        return PlainTextResponse("Method Not Allowed", status_code=405, headers=exc.headers)
    return await http_exception_handler(request, exc)


@app.get("/health")
def health():
    """Проверка доступности сервиса."""
    return {"status": "ok"}


@app.get("/")
def root():
    """Корневой эндпоинт."""
    return {"service": "guestbook-backend", "docs": "/docs"}
