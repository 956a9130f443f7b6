"""Check result model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

import dns.message
import yaml

from src.models.check import CheckDefinition
from src.utils.duration import format_duration


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check execution.

    Attributes:
        name: Check name.
        timestamp_ns: Query issue time, nanoseconds since the epoch.
        rtt: Measured round-trip time in seconds (0.0 when no response).
        check: The compiled check definition that was run.
        error: Human-readable execution error, None when the exchange succeeded.
        as_expected: True if every expected record was found in its section.
        response: Raw DNS response, kept for error reports only.
    """

    name: str
    timestamp_ns: int
    rtt: float
    check: CheckDefinition
    error: str | None = None
    as_expected: bool = False
    response: dns.message.Message | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def timestamp(self) -> datetime:
        """Query issue time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp_ns / 1_000_000_000, tz=timezone.utc)

    def ok(self) -> bool:
        """Check if the check passed.

        Returns:
            bool: True if no execution error occurred and the response matched.
        """
        return self.error is None and self.as_expected

    def summary_line(self) -> str:
        """Machine-parsable summary: timestamp_ns,name,ok,rtt."""
        ok = "true" if self.ok() else "false"
        return f"{self.timestamp_ns},{self.name},{ok},{format_duration(self.rtt)}"

    def to_dict(self) -> dict:
        """Serialize metadata to a YAML-compatible dict (response excluded)."""
        return {
            "name": self.name,
            "timestamp": self.timestamp.isoformat(),
            "rtt": format_duration(self.rtt),
            "error_string": self.error or "",
            "as_expected": self.as_expected,
            "check": self.check.to_dict(),
        }

    def to_report(self) -> str:
        """Render the human-oriented error report.

        Returns:
            str: YAML metadata block followed by the raw response text.
        """
        metadata = yaml.safe_dump(
            self.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True
        )
        response = self.response.to_text() if self.response is not None else "<nil>"
        return f"--- Metadata:\n{metadata}\n\n--- Response:\n{response}\n\n"
