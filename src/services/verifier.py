"""Expectation verification against observed DNS response sections."""

from typing import Callable, Iterable, Sequence

import dns.message

from src.models.check import ExpectedRecords
from src.models.resource_record import ResourceRecord, records_from_section


RecordMatcher = Callable[[ResourceRecord, ResourceRecord], bool]


def strict_match(expected: ResourceRecord, observed: ResourceRecord) -> bool:
    """Records match when their full canonical text (TTL included) is identical."""
    return expected.to_text() == observed.to_text()


def ignore_ttl_match(expected: ResourceRecord, observed: ResourceRecord) -> bool:
    """Records match when name, class, type and data are identical."""
    return expected.identity_text() == observed.identity_text()


def matcher_for(ignore_ttl: bool) -> RecordMatcher:
    return ignore_ttl_match if ignore_ttl else strict_match


def verify(
    expected: Sequence[ResourceRecord],
    observed: Iterable[ResourceRecord],
    matcher: RecordMatcher = strict_match,
) -> bool:
    """Check that every expected record appears among the observed records.

    This is containment, not equality: extra observed records are ignored,
    and an empty expectation is always satisfied. Matching is not exclusive,
    so one observed record may satisfy several identical expectations.

    Args:
        expected: Records that must be present.
        observed: Records found in the response section.
        matcher: Record comparison predicate.

    Returns:
        bool: True if every expected record has a match.
    """
    observed = list(observed)
    return all(
        any(matcher(expected_rr, observed_rr) for observed_rr in observed)
        for expected_rr in expected
    )


def verify_response(
    expect: ExpectedRecords,
    response: dns.message.Message,
    matcher: RecordMatcher = strict_match,
) -> bool:
    """Verify all three sections of a response independently.

    Returns:
        bool: AND of the answer, authority and additional section verifications.
    """
    answer_ok = verify(expect.answer, records_from_section(response.answer), matcher)
    authority_ok = verify(
        expect.authority, records_from_section(response.authority), matcher
    )
    additional_ok = verify(
        expect.additional, records_from_section(response.additional), matcher
    )
    return answer_ok and authority_ok and additional_ok
