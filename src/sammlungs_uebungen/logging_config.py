"""
Logging Setup

Logs gehen auf stderr, damit der Dialog auf stdout nicht gestört wird.
- text: lesbare Zeilen
- json: eine JSON-Zeile pro Eintrag
setup_logging wird einmal in main() aufgerufen.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class JSONFormatter(logging.Formatter):
    """Formatiert einen Log-Eintrag als JSON."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """
    Konfiguriert das Logging für die Anwendung.
    Unbekannte Level fallen auf WARNING zurück.
    Gibt den Handler zurück, damit er wieder entfernt werden kann.
    """
    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
