"""structlog 로깅 설정 모듈.

structlog configuration layered over the standard logging module.
Call setup_logging() once at startup; modules obtain loggers with
structlog.get_logger(__name__).
"""

import logging
import sys

import structlog
from structlog.types import EventDict

from app.config import settings


def add_app_context(logger: logging.Logger, method_name: str, event_dict: EventDict) -> EventDict:
    """모든 로그 이벤트에 서비스 이름을 추가합니다 (Tag events with the service name)."""
    event_dict["service"] = settings.APP_NAME
    return event_dict


def setup_logging() -> None:
    """로깅 시스템을 초기화합니다.

    Configure stdlib logging and structlog. Console rendering by default,
    JSON lines when LOG_JSON is enabled.
    """
    level: int = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    # SQLAlchemy 엔진 로그는 DEBUG 설정의 echo로만 제어 (SQL echo is driven by settings.DEBUG)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            add_app_context,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
