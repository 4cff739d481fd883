from __future__ import annotations

import datetime
import json
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.config.settings import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class JsonFormatter(logging.Formatter):
    """One JSON object per line, tagged with the server tag of this instance."""

    def __init__(self, server_tag: str) -> None:
        super().__init__()
        self.server_tag = server_tag

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.datetime.fromtimestamp(
                record.created, tz=datetime.UTC
            ).strftime(LOG_DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "server": self.server_tag,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def build_handlers(settings: "Settings") -> list[logging.Handler]:
    if settings.log_json:
        formatter: logging.Formatter = JsonFormatter(settings.server_tag)
    else:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(settings: "Settings") -> None:
    logging.basicConfig(
        level=settings.log_level, handlers=build_handlers(settings), force=True
    )
    # Per-request access lines would drown the scan summaries.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
