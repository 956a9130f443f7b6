"""pytest fixtures for testing."""

import dns.message
import dns.rcode
import dns.rrset
import pytest


@pytest.fixture
def make_check():
    """Factory for compiled check definitions."""
    from src.models.check import CheckConfig, ExpectConfig
    from src.services.check_compiler import CheckDefaults, compile_check

    def _make_check(
        name="example",
        resolver="192.0.2.53:53",
        resolve="example.com",
        answer=None,
        authority=None,
        additional=None,
        **kwargs,
    ):
        config = CheckConfig(
            resolver=resolver,
            resolve=resolve,
            expect=ExpectConfig(
                answer_section=answer or [],
                authority_section=authority or [],
                additional_section=additional or [],
            ),
            **kwargs,
        )
        return compile_check(name, config, CheckDefaults())

    return _make_check


@pytest.fixture
def make_response():
    """Factory for DNS responses with records in each section."""

    def _make_response(
        qname="example.com.",
        answer=(),
        authority=(),
        additional=(),
        rcode=dns.rcode.NOERROR,
    ):
        query = dns.message.make_query(qname, "A")
        response = dns.message.make_response(query)
        for section, lines in (
            (response.answer, answer),
            (response.authority, authority),
            (response.additional, additional),
        ):
            for name, ttl, rdtype, data in lines:
                section.append(dns.rrset.from_text(name, ttl, "IN", rdtype, data))
        response.set_rcode(rcode)
        return response

    return _make_response
