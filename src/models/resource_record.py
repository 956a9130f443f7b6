"""Resource record model and presentation-format parser.

Expectation strings are written as single zone-file lines, e.g.
"example.com. 300 IN A 93.184.216.34". They are parsed into ResourceRecord
objects whose canonical text is what record comparison is based on.
"""

from dataclasses import dataclass

import dns.exception
import dns.name
import dns.rdata
import dns.rdataclass
import dns.rdatatype
import dns.rrset
import dns.tokenizer
import dns.ttl

from src.exceptions import ParseError


DEFAULT_TTL = 3600
DEFAULT_RDCLASS = dns.rdataclass.IN


@dataclass(frozen=True)
class ResourceRecord:
    """A single DNS resource record.

    Attributes:
        name: Absolute owner name.
        ttl: Time to live in seconds.
        rdclass: Record class (usually IN).
        rdtype: Record type (A, AAAA, MX, ...).
        rdata: Type-specific data.
    """

    name: dns.name.Name
    ttl: int
    rdclass: dns.rdataclass.RdataClass
    rdtype: dns.rdatatype.RdataType
    rdata: dns.rdata.Rdata

    def to_text(self) -> str:
        """Canonical presentation form: name, TTL, class, type and data."""
        return f"{self.name.to_text()} {self.ttl} {self.identity_tail()}"

    def identity_text(self) -> str:
        """Canonical presentation form without the TTL."""
        return f"{self.name.to_text()} {self.identity_tail()}"

    def identity_tail(self) -> str:
        return (
            f"{dns.rdataclass.to_text(self.rdclass)} "
            f"{dns.rdatatype.to_text(self.rdtype)} "
            f"{self.rdata.to_text()}"
        )

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def from_rrset(cls, rrset: dns.rrset.RRset) -> list["ResourceRecord"]:
        """Flatten an RRset into one ResourceRecord per rdata."""
        return [
            cls(
                name=rrset.name,
                ttl=rrset.ttl,
                rdclass=rrset.rdclass,
                rdtype=rrset.rdtype,
                rdata=rdata,
            )
            for rdata in rrset
        ]


def records_from_section(section: list[dns.rrset.RRset]) -> list[ResourceRecord]:
    """Flatten a DNS message section into individual resource records.

    Args:
        section: RRsets from a response section (answer, authority, additional).

    Returns:
        list[ResourceRecord]: Records in section order.
    """
    records: list[ResourceRecord] = []
    for rrset in section:
        records.extend(ResourceRecord.from_rrset(rrset))
    return records


def parse_rr(text: str) -> ResourceRecord:
    """Parse one line of DNS presentation format into a ResourceRecord.

    The owner name comes first, followed by an optional TTL and an optional
    class in either order, the record type and the type-specific data.
    Relative names are made absolute against the root. A missing TTL
    defaults to 3600 and a missing class to IN.

    Args:
        text: Record line, e.g. "example.com. 300 IN A 93.184.216.34".

    Returns:
        ResourceRecord: Parsed record.

    Raises:
        ParseError: If the line is empty or not valid presentation format.
    """
    line = (text or "").strip()
    if not line:
        raise ParseError(str(text), "empty record")

    try:
        tok = dns.tokenizer.Tokenizer(line)
        name = tok.get_name(origin=dns.name.root)

        ttl = None
        rdclass = None
        while True:
            token = tok.get()
            if token.is_eol_or_eof():
                raise ParseError(line, "missing record type")
            if not token.is_identifier():
                raise ParseError(line, f"unexpected token {token.value!r}")

            value = token.value
            if ttl is None and value[:1].isdigit():
                ttl = dns.ttl.from_text(value)
                continue
            if rdclass is None:
                try:
                    rdclass = dns.rdataclass.from_text(value)
                    continue
                except dns.rdataclass.UnknownRdataclass:
                    pass
            rdtype = dns.rdatatype.from_text(value)
            break

        rdclass = DEFAULT_RDCLASS if rdclass is None else rdclass
        rdata = dns.rdata.from_text(
            rdclass, rdtype, tok, origin=dns.name.root, relativize=False
        )
    except dns.exception.DNSException as e:
        raise ParseError(line, str(e) or type(e).__name__) from e
    except ValueError as e:
        raise ParseError(line, str(e)) from e

    return ResourceRecord(
        name=name,
        ttl=DEFAULT_TTL if ttl is None else ttl,
        rdclass=rdclass,
        rdtype=rdtype,
        rdata=rdata,
    )
