"""Structured JSON logging for batch runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, TextIO

from pythonjsonlogger import jsonlogger

from rental_ledger.config import settings

logger = logging.getLogger("rental_ledger")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: TextIO = sys.stdout) -> None:
    """Configure structured JSON logging"""
    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(stream)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    root.addHandler(handler)


def log_reversal(booking_id: int, parties: List[str]) -> None:
    """Warn that sign normalization flipped a per-booking amount"""
    logger.warning(
        "Negative ledger amount reversed",
        extra={
            "booking_id": booking_id,
            "step": "ledger_normalization",
            "parties": parties,
        },
    )


def log_report(bookings: int, modifications: int, duration_ms: float) -> None:
    """Log structured summary of a report run"""
    logger.info(
        "Report completed",
        extra={
            "step": "report_complete",
            "bookings": bookings,
            "modifications": modifications,
            "duration_ms": duration_ms,
        },
    )
