"""로깅 설정 모듈.

Logging configuration.
Sets up console logging at the configured level and quiets noisy
third-party loggers. Called once at application startup.
"""

import logging
import sys

from app.config import settings


def configure_logging() -> None:
    """루트 로거를 설정합니다 (Configure the root logger from settings)."""
    log_level: int = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("app").setLevel(log_level)

    # 외부 라이브러리 로그 축소 — Quiet down third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
