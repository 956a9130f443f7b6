"""Unit tests for the CheckResult model."""

from datetime import datetime, timezone

import yaml

from src.models.check_result import CheckResult


TIMESTAMP_NS = 1_700_000_000_123_456_789


def make_result(check, **kwargs):
    base = {
        "name": check.name,
        "timestamp_ns": TIMESTAMP_NS,
        "rtt": 0.012345,
        "check": check,
    }
    base.update(kwargs)
    return CheckResult(**base)


def test_ok_requires_no_error_and_as_expected(make_check):
    check = make_check()

    assert make_result(check, as_expected=True).ok() is True
    assert make_result(check, as_expected=False).ok() is False
    assert make_result(check, error="boom", as_expected=False).ok() is False


def test_ok_false_with_error_even_if_as_expected(make_check):
    """Test that an execution error always makes the result not OK."""
    result = make_result(make_check(), error="boom", as_expected=True)

    assert result.ok() is False


def test_as_expected_defaults_false(make_check):
    result = make_result(make_check())

    assert result.as_expected is False
    assert result.error is None
    assert result.response is None


def test_timestamp_property(make_check):
    result = make_result(make_check())

    assert result.timestamp == datetime.fromtimestamp(
        TIMESTAMP_NS / 1_000_000_000, tz=timezone.utc
    )
    assert result.timestamp.tzinfo is timezone.utc


def test_summary_line(make_check):
    result = make_result(make_check(name="example"), as_expected=True)

    assert result.summary_line() == f"{TIMESTAMP_NS},example,true,12.345ms"


def test_summary_line_failure(make_check):
    result = make_result(make_check(name="example"), error="boom", rtt=0.0)

    assert result.summary_line() == f"{TIMESTAMP_NS},example,false,0s"


def test_to_report_without_response(make_check):
    result = make_result(make_check(name="example"), error="ERROR: timed out")

    report = result.to_report()

    assert report.startswith("--- Metadata:\n")
    assert "\n\n--- Response:\n<nil>\n\n" in report
    metadata = yaml.safe_load(report.split("--- Metadata:\n")[1].split("\n\n--- Response:")[0])
    assert metadata["name"] == "example"
    assert metadata["error_string"] == "ERROR: timed out"
    assert metadata["as_expected"] is False
    assert metadata["rtt"] == "12.345ms"
    assert metadata["check"]["proto"] == "udp"
    assert metadata["check"]["resolver"] == "192.0.2.53:53"


def test_to_report_includes_response_text(make_check, make_response):
    response = make_response(answer=[("example.com.", 300, "A", "192.0.2.1")])
    result = make_result(make_check(), as_expected=False, response=response)

    report = result.to_report()

    assert ";ANSWER" in report
    assert "example.com. 300 IN A 192.0.2.1" in report


def test_to_report_includes_expect_config(make_check):
    check = make_check(answer=["example.com. 300 IN A 192.0.2.1"])

    report = make_result(check).to_report()

    assert "example.com. 300 IN A 192.0.2.1" in report
    assert "answer_section" in report


def test_to_dict_excludes_response(make_check, make_response):
    result = make_result(make_check(), response=make_response())

    assert "response" not in result.to_dict()
