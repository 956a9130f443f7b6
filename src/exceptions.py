"""Custom exceptions for the DNS check probe.

Compile-time errors (ParseError, DurationFormatError) abort the whole run.
Runtime errors (ExchangeError, ResponseCodeError) are captured on a single
check's result and never interrupt the batch.
"""


class ProbeError(Exception):
    """Base exception for all probe errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ParseError(ProbeError):
    """Raised when an expectation string is not valid DNS presentation format."""

    def __init__(self, line: str, reason: str, kind: str = "resource record") -> None:
        super().__init__(
            f"failed to parse {kind} {line!r}: {reason}",
            {"line": line, "reason": reason, "kind": kind},
        )
        self.kind = kind
        self.line = line
        self.reason = reason


class DurationFormatError(ProbeError):
    """Raised when a timeout string is not a valid positive duration."""

    def __init__(self, value: str, reason: str = "invalid duration") -> None:
        super().__init__(f"{reason}: {value!r}", {"value": value})
        self.value = value


class ExchangeError(ProbeError):
    """Raised when the DNS exchange for a check fails at the transport level."""

    def __init__(self, check_name: str, cause: str) -> None:
        super().__init__(
            f"ERROR: Failed to run check '{check_name}', error was: {cause}",
            {"check": check_name, "cause": cause},
        )
        self.check_name = check_name
        self.cause = cause


class ResponseCodeError(ProbeError):
    """Raised when the resolver answers with a non-NOERROR response code."""

    def __init__(self, check_name: str, rcode: str) -> None:
        super().__init__(
            f"ERROR: invalid answer for check '{check_name}' (rcode {rcode})",
            {"check": check_name, "rcode": rcode},
        )
        self.check_name = check_name
        self.rcode = rcode
