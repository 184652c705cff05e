"""
Настройки приложения из переменных окружения. Секреты не в репозитории.
Строка подключения к MongoDB читается при каждом запросе через config.MONGO_URI:
пустое значение даёт 500 на каждый запрос, старт при этом не падает.
"""
import os


def _env(key: str, default: str | None = None) -> str | None:
    return os.environ.get(key, default)


# MongoDB: пустой URI означает, что хранилище не настроено
MONGO_URI = _env("MONGO_URI", "")
MONGO_DB_NAME = _env("MONGO_DB_NAME", "birthday")
MONGO_COLLECTION = _env("MONGO_COLLECTION", "comments")
MONGO_TIMEOUT_MS = int(_env("MONGO_TIMEOUT_MS", "5000") or "5000")

# Минимальный интервал между принятыми комментариями с одного источника
COMMENT_COOLDOWN_SECONDS = float(_env("COMMENT_COOLDOWN_SECONDS", "30") or "30")

# Список запрещённых подстрок: BAD_WORDS (через запятую) или файл BAD_WORDS_FILE
BAD_WORDS = _env("BAD_WORDS", "")
BAD_WORDS_FILE = _env("BAD_WORDS_FILE", "")
DEFAULT_BAD_WORDS = ("badword1", "badword2", "curseword")

# CORS (опционально)
CORS_ORIGINS = (_env("CORS_ORIGINS", "*") or "*").split(",")

LOG_LEVEL = _env("LOG_LEVEL", "INFO")
