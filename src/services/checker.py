"""Check executor: runs each compiled check against its resolver."""

import logging
import time

import dns.exception
import dns.flags
import dns.message
import dns.name
import dns.query
import dns.rcode
import dns.rdatatype

from src.exceptions import ExchangeError, ResponseCodeError
from src.models.check import CheckDefinition, Transport
from src.models.check_result import CheckResult
from src.services.logger import log_check_result
from src.services.verifier import matcher_for, verify_response
from src.utils.address import split_resolver_address


logger = logging.getLogger(__name__)


class DNSClient:
    """Single-exchange DNS client over UDP or TCP.

    The transport and timeout are plain attributes, reconfigured by the
    Checker before every exchange. Not safe to share between threads.
    """

    def __init__(self, transport: Transport = Transport.UDP, timeout: float = 5.0):
        self.transport = transport
        self.timeout = timeout

    def exchange(
        self, query: dns.message.Message, address: str
    ) -> tuple[dns.message.Message, float]:
        """Send a query and wait for the response.

        Args:
            query: DNS query message.
            address: Resolver address ("host", "host:port" or "[v6]:port").

        Returns:
            tuple[dns.message.Message, float]: (response, round-trip time in seconds)

        Raises:
            dns.exception.DNSException: On timeout or malformed response.
            OSError: On socket-level failures.
            EOFError: If a TCP connection is closed mid-response.
            ValueError: If the resolver address is invalid.
        """
        host, port = split_resolver_address(address)
        started = time.perf_counter()
        if self.transport is Transport.TCP:
            response = dns.query.tcp(query, host, timeout=self.timeout, port=port)
        else:
            response = dns.query.udp(query, host, timeout=self.timeout, port=port)
        return response, time.perf_counter() - started


def build_query(check: CheckDefinition) -> dns.message.Message:
    """Build the recursive query for a check's name and query type."""
    qname = dns.name.from_text(check.resolve)  # absolute (FQDN) by default
    query = dns.message.make_query(qname, dns.rdatatype.from_text(check.query_type))
    query.flags |= dns.flags.RD
    return query


class Checker:
    """Runs compiled checks one at a time, in declaration order.

    Every check yields exactly one CheckResult. A failing check never
    aborts the batch and is never retried.
    """

    def __init__(
        self,
        checks: dict[str, CheckDefinition],
        client: DNSClient | None = None,
    ):
        """Initialize the checker.

        Args:
            checks: Compiled checks keyed by name.
            client: DNS client to reuse across checks (a new one if omitted).
        """
        self.checks = checks
        self.client = client or DNSClient()

    def run(self) -> list[CheckResult]:
        """Run every check.

        Returns:
            list[CheckResult]: One result per check, in declaration order.
        """
        results = []
        for name, check in self.checks.items():
            result = self.run_check(name, check)
            log_check_result(
                name=result.name,
                ok=result.ok(),
                as_expected=result.as_expected,
                error=result.error,
                rtt_ms=round(result.rtt * 1000, 3),
            )
            results.append(result)
        return results

    def run_check(self, name: str, check: CheckDefinition) -> CheckResult:
        """Run a single check and classify its outcome.

        Args:
            name: Check name.
            check: Compiled check definition.

        Returns:
            CheckResult: Outcome of the check.
        """
        self.client.transport = check.transport
        self.client.timeout = check.timeout

        timestamp_ns = time.time_ns()
        try:
            query = build_query(check)
            response, rtt = self.client.exchange(query, check.resolver)
        except (dns.exception.DNSException, OSError, EOFError, ValueError) as e:
            cause = str(e) or type(e).__name__
            error = ExchangeError(name, cause)
            logger.debug(
                "DNS exchange failed",
                extra={"check": name, "resolver": check.resolver, "cause": cause},
            )
            return CheckResult(
                name=name,
                timestamp_ns=timestamp_ns,
                rtt=0.0,
                check=check,
                error=error.message,
            )

        rcode = response.rcode()
        if rcode != dns.rcode.NOERROR:
            error = ResponseCodeError(name, dns.rcode.to_text(rcode))
            return CheckResult(
                name=name,
                timestamp_ns=timestamp_ns,
                rtt=rtt,
                check=check,
                error=error.message,
                response=response,
            )

        as_expected = verify_response(
            check.expect, response, matcher_for(check.ignore_ttl)
        )
        return CheckResult(
            name=name,
            timestamp_ns=timestamp_ns,
            rtt=rtt,
            check=check,
            as_expected=as_expected,
            response=response,
        )
