"""Structured JSON logging.

Log lines go to stderr; stdout carries the per-check summary lines.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Run ID for correlating all log entries of one probe run
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        """Add custom fields to log record.

        Args:
            log_record: The log record to modify.
            record: The original logging.LogRecord.
            message_dict: Additional fields from the logging call.
        """
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the probe.

    Args:
        verbose: Log at DEBUG instead of INFO.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_check_result(
    name: str,
    ok: bool,
    as_expected: bool,
    error: str | None,
    rtt_ms: float,
) -> None:
    """Log structured per-check result.

    Args:
        name: Check name.
        ok: Whether the check passed.
        as_expected: Whether the response matched the expectation.
        error: Execution error message, if any.
        rtt_ms: Round-trip time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.log(
        logging.INFO if ok else logging.WARNING,
        "Check completed",
        extra={
            "check": name,
            "ok": ok,
            "as_expected": as_expected,
            "error": error,
            "rtt_ms": rtt_ms,
        },
    )


def log_run_summary(
    total_checks: int,
    passed: int,
    failed: int,
    reports_written: int,
    duration_sec: float,
) -> None:
    """Log run completion summary.

    Args:
        total_checks: Number of checks executed.
        passed: Number of checks that were OK.
        failed: Number of checks that were not OK.
        reports_written: Number of error reports written.
        duration_sec: Total run time in seconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Run completed",
        extra={
            "total_checks": total_checks,
            "passed": passed,
            "failed": failed,
            "reports_written": reports_written,
            "duration_sec": duration_sec,
        },
    )
