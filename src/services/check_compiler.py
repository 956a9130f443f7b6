"""Compiles raw check configuration into ready-to-run check definitions."""

import logging
from dataclasses import dataclass

import dns.rdatatype

from src.exceptions import DurationFormatError, ParseError
from src.models.check import (
    CheckConfig,
    CheckDefinition,
    ExpectConfig,
    ExpectedRecords,
    Transport,
)
from src.models.resource_record import ResourceRecord, parse_rr
from src.utils.duration import parse_duration


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckDefaults:
    """Defaults applied to checks that leave a field unset.

    Attributes:
        resolver_timeout: Duration string used when a check has no timeout.
        query_type: Record type queried when a check names none.
    """

    resolver_timeout: str = "5s"
    query_type: str = "A"


def parse_records(lines: list[str]) -> tuple[ResourceRecord, ...]:
    """Parse a list of expectation strings, stopping at the first failure.

    Raises:
        ParseError: If any line is not valid presentation format.
    """
    return tuple(parse_rr(line) for line in lines)


def parse_timeout(value: str, default: str) -> float:
    """Parse a check timeout, falling back to the default when unset.

    Raises:
        DurationFormatError: If the duration is invalid or not positive.
    """
    text = value or default
    timeout = parse_duration(text)
    if timeout <= 0:
        raise DurationFormatError(text, "timeout must be positive")
    return timeout


def parse_query_type(value: str, default: str) -> str:
    """Normalize a query type name such as "aaaa" to "AAAA".

    Raises:
        ParseError: If the record type is unknown.
    """
    text = value or default
    try:
        return dns.rdatatype.to_text(dns.rdatatype.from_text(text))
    except dns.rdatatype.UnknownRdatatype as e:
        raise ParseError(text, "unknown record type", kind="query type") from e


def compile_check(
    name: str, config: CheckConfig, defaults: CheckDefaults
) -> CheckDefinition:
    """Compile a single check configuration.

    Args:
        name: Check name.
        config: Raw check configuration.
        defaults: Defaults for unset fields.

    Returns:
        CheckDefinition: Compiled check.

    Raises:
        ParseError: If an expectation string or the query type is invalid.
        DurationFormatError: If the timeout is invalid.
    """
    expect_config = config.expect or ExpectConfig()
    expect = ExpectedRecords(
        answer=parse_records(expect_config.answer_section),
        authority=parse_records(expect_config.authority_section),
        additional=parse_records(expect_config.additional_section),
    )

    return CheckDefinition(
        name=name,
        resolver=config.resolver,
        transport=Transport.TCP if config.use_tcp else Transport.UDP,
        timeout=parse_timeout(config.resolver_timeout, defaults.resolver_timeout),
        resolve=config.resolve,
        query_type=parse_query_type(config.query_type, defaults.query_type),
        ignore_ttl=config.ignore_ttl,
        expect=expect,
        expect_config=expect_config,
    )


def compile_checks(
    check_configs: dict[str, CheckConfig],
    defaults: CheckDefaults | None = None,
) -> dict[str, CheckDefinition]:
    """Compile every configured check, failing fast on the first error.

    Declaration order of the input mapping is preserved in the output.

    Args:
        check_configs: Mapping of check name to raw configuration.
        defaults: Defaults for unset fields (CheckDefaults() if omitted).

    Returns:
        dict[str, CheckDefinition]: Compiled checks keyed by name.

    Raises:
        ParseError: On the first invalid expectation string or query type.
        DurationFormatError: On the first invalid timeout. Both carry the
            failing check's name in details["check"].
    """
    if defaults is None:
        defaults = CheckDefaults()

    checks: dict[str, CheckDefinition] = {}
    for name, config in check_configs.items():
        try:
            checks[name] = compile_check(name, config, defaults)
        except (ParseError, DurationFormatError) as e:
            e.details["check"] = name
            raise

    logger.debug("Compiled checks", extra={"check_count": len(checks)})
    return checks
