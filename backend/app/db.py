"""
Подключение к MongoDB (sync, pymongo). Клиент открывается на один запрос и
закрывается при выходе из контекста, пула между запросами нет.
"""
from contextlib import contextmanager
from typing import Generator

from pymongo import MongoClient
from pymongo.collection import Collection

from app import config


class StorageNotConfigured(RuntimeError):
    """MONGO_URI не задан."""


@contextmanager
def get_comments_collection() -> Generator[Collection, None, None]:
    if not config.MONGO_URI:
        raise StorageNotConfigured("MONGO_URI is not set")
    client = MongoClient(
        config.MONGO_URI,
        serverSelectionTimeoutMS=config.MONGO_TIMEOUT_MS,
        connectTimeoutMS=config.MONGO_TIMEOUT_MS,
    )
    try:
        yield client[config.MONGO_DB_NAME][config.MONGO_COLLECTION]
    finally:
        client.close()
