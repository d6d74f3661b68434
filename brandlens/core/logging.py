"""Centralized logging configuration.

Analysis log calls pass their context through ``extra`` (brand, country,
counts and the main brand's metrics). The JSON formatter emits those keys
as top-level fields; the text format shows the brand on every line.
"""

import json
import logging
import sys
from datetime import datetime, timezone

from brandlens.core.config import settings

# ``extra`` keys copied into structured records when present
ANALYSIS_FIELDS = ("brand", "country", "responses", "competitors", "position", "visibility", "sentiment")

# Loggers that emit one DEBUG line per response and entity
PER_RESPONSE_LOGGERS = (
    "brandlens.analysis.mention_counter",
    "brandlens.analysis.sentiment",
    "brandlens.analysis.overview",
)

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | brand=%(brand)s | %(message)s"


class JSONFormatter(logging.Formatter):
    """Structured JSON log formatter for production."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            log_data["exception"] = self.formatException(record.exc_info)
        for key in ANALYSIS_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        return json.dumps(log_data, ensure_ascii=False)


class BrandContextFilter(logging.Filter):
    """Give records logged outside an analysis a placeholder brand."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "brand"):
            record.brand = "-"
        return True


def setup_logging() -> None:
    """Configure logging for the embedding process."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    if settings.log_json:
        handler.setFormatter(JSONFormatter())
    else:
        handler.addFilter(BrandContextFilter())
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root.addHandler(handler)

    # Per-response debug lines only with LOG_ANALYSIS_DEBUG
    for name in PER_RESPONSE_LOGGERS:
        logging.getLogger(name).setLevel(level if settings.log_analysis_debug else max(level, logging.INFO))
