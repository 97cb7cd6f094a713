import json
import logging
import os
from datetime import datetime, timezone
from logging.config import dictConfig
from typing import Any, Dict

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging() -> None:
    """Configure logging from PREPTRACK_LOG_LEVEL, PREPTRACK_LOG_FORMAT and PREPTRACK_DEBUG_HTTP."""
    level = os.getenv("PREPTRACK_LOG_LEVEL", "INFO").upper()
    formatter = "json" if os.getenv("PREPTRACK_LOG_FORMAT", "text").lower() == "json" else "default"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": DEFAULT_LOG_FORMAT},
                "json": {"()": JSONFormatter},
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter,
                },
            },
            "loggers": {
                "preptrack": {"level": level},
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )

    # The AI client libraries log every request at INFO.
    http_level = logging.DEBUG if os.getenv("PREPTRACK_DEBUG_HTTP", "0") == "1" else logging.WARNING
    for name in ("httpx", "httpcore", "openai"):
        logging.getLogger(name).setLevel(http_level)
