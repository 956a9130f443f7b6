"""Check configuration and compiled check definition models."""

from dataclasses import dataclass, field
from enum import Enum

from src.models.resource_record import ResourceRecord
from src.utils.duration import format_duration


class Transport(Enum):
    """Transport used for the DNS exchange."""

    UDP = "udp"
    TCP = "tcp"


@dataclass(frozen=True)
class ExpectConfig:
    """Raw expectation strings, one tuple per response section.

    Sections are stored as tuples so a compiled check keeps exactly the
    strings it was compiled from.
    """

    answer_section: tuple[str, ...] = ()
    authority_section: tuple[str, ...] = ()
    additional_section: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("answer_section", "authority_section", "additional_section"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def to_dict(self) -> dict:
        return {
            "answer_section": list(self.answer_section),
            "authority_section": list(self.authority_section),
            "additional_section": list(self.additional_section),
        }


@dataclass
class CheckConfig:
    """Raw configuration of a single check as read from the config file.

    Attributes:
        resolver: Resolver address ("host", "host:port" or "[v6]:port").
        resolve: Name to query.
        resolver_timeout: Duration string such as "2s"; empty means default.
        use_tcp: Query over TCP instead of UDP.
        query_type: Record type to query; empty means default.
        ignore_ttl: Compare records without their TTL.
        expect: Expected records per response section.
    """

    resolver: str
    resolve: str
    resolver_timeout: str = ""
    use_tcp: bool = False
    query_type: str = ""
    ignore_ttl: bool = False
    expect: ExpectConfig = field(default_factory=ExpectConfig)


@dataclass(frozen=True)
class ExpectedRecords:
    """Parsed expected records for the answer, authority and additional sections."""

    answer: tuple[ResourceRecord, ...] = ()
    authority: tuple[ResourceRecord, ...] = ()
    additional: tuple[ResourceRecord, ...] = ()


@dataclass(frozen=True)
class CheckDefinition:
    """A compiled, ready-to-run check.

    Attributes:
        name: Unique check name.
        resolver: Resolver address, passed through verbatim.
        transport: UDP or TCP.
        timeout: Exchange timeout in seconds (always > 0).
        resolve: Query name, passed through verbatim.
        query_type: Record type name to query (e.g. "A").
        ignore_ttl: Whether record comparison ignores TTLs.
        expect: Parsed expected records.
        expect_config: Expectation strings as configured, kept for reports.
    """

    name: str
    resolver: str
    transport: Transport
    timeout: float
    resolve: str
    query_type: str
    ignore_ttl: bool
    expect: ExpectedRecords
    expect_config: ExpectConfig

    def to_dict(self) -> dict:
        """Serialize to a YAML/JSON-compatible dict.

        Returns:
            dict: Plain representation used in error reports.
        """
        return {
            "resolver": self.resolver,
            "resolver_timeout": format_duration(self.timeout),
            "proto": self.transport.value,
            "resolve": self.resolve,
            "query_type": self.query_type,
            "ignore_ttl": self.ignore_ttl,
            "expect_config": self.expect_config.to_dict(),
        }
