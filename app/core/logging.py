"""Настройка логирования: JSON в продакшене, читаемый текст в разработке"""

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Форматирование записей лога в JSON"""

    extra_fields = ("path", "method", "status_code", "client_ip", "user_id")

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.extra_fields:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Настройка корневого логгера (один обработчик на процесс)"""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_cms_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._cms_handler = True
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
