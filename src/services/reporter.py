"""Result reporting: summary lines and error report files."""

import logging
import os
from pathlib import Path
from typing import Iterable, TextIO

from src.models.check_result import CheckResult


logger = logging.getLogger(__name__)


class ResultReporter:
    """Writes check results to a stream and, for failures, to report files."""

    @staticmethod
    def write_summary(results: Iterable[CheckResult], stream: TextIO) -> None:
        """Write one summary line per result.

        Args:
            results: Check results, in run order.
            stream: Output stream (stdout in normal runs).
        """
        for result in results:
            stream.write(result.summary_line() + "\n")

    @staticmethod
    def report_filename(result: CheckResult) -> str:
        """Error report file name, keyed by check name and issue time."""
        return f"{result.name}-{result.timestamp_ns}-error.report"

    @staticmethod
    def write_error_report(result: CheckResult, directory: str | Path) -> Path:
        """Write the error report for a single result.

        Args:
            result: Check result to report.
            directory: Destination directory, created if missing.

        Returns:
            Path: Path of the written report.

        Raises:
            OSError: If the directory or file cannot be written.
        """
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / ResultReporter.report_filename(result)

        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(result.to_report())

        logger.info(
            "Error report written", extra={"check": result.name, "path": str(path)}
        )
        return path

    @staticmethod
    def write_error_reports(
        results: Iterable[CheckResult], directory: str | Path | None
    ) -> list[Path]:
        """Write error reports for every result that is not OK.

        Nothing is written when no directory is configured. A report that
        fails to write is logged and does not stop the remaining reports.

        Returns:
            list[Path]: Paths of the reports written.
        """
        if not directory:
            return []

        written = []
        for result in results:
            if result.ok():
                continue
            try:
                written.append(ResultReporter.write_error_report(result, directory))
            except OSError as e:
                logger.error(
                    f"Failed to write error report for {result.name}: {e}",
                    extra={"check": result.name},
                )
        return written
