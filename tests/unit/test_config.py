"""Unit tests for configuration loading and validation."""

import pytest

from src.config import Config, load_check_configs, parse_check_configs


VALID_CONFIG = """
checks:
  example:
    resolver: "8.8.8.8:53"
    resolver_timeout: 2s
    resolve: example.com
    expect:
      answer_section:
        - "example.com. 300 IN A 93.184.216.34"
  over_tcp:
    resolver: "[2001:db8::53]:53"
    resolve: example.org
    use_tcp: true
    query_type: AAAA
    ignore_ttl: true
"""


@pytest.fixture
def clean_env(monkeypatch):
    for key in (
        "CONFIG_FILE",
        "ERROR_REPORTS_DIR",
        "DEFAULT_RESOLVER_TIMEOUT",
        "DEFAULT_QUERY_TYPE",
        "VERBOSE",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_config_from_env_defaults(clean_env):
    """Test defaults when no environment variables are set."""
    config = Config.from_env()

    assert config.config_file == "config.yml"
    assert config.error_reports_dir == ""
    assert config.default_resolver_timeout == "5s"
    assert config.default_query_type == "A"
    assert config.verbose is False


def test_config_from_env_overrides(clean_env):
    clean_env.setenv("CONFIG_FILE", "/etc/probe/checks.yml")
    clean_env.setenv("ERROR_REPORTS_DIR", "/var/lib/probe/reports")
    clean_env.setenv("DEFAULT_RESOLVER_TIMEOUT", "2s")
    clean_env.setenv("DEFAULT_QUERY_TYPE", "AAAA")

    config = Config.from_env()

    assert config.config_file == "/etc/probe/checks.yml"
    assert config.error_reports_dir == "/var/lib/probe/reports"
    assert config.default_resolver_timeout == "2s"
    assert config.default_query_type == "AAAA"


def test_config_empty_config_file_rejected(clean_env):
    clean_env.setenv("CONFIG_FILE", "  ")

    with pytest.raises(ValueError, match="CONFIG_FILE must not be empty"):
        Config.from_env()


def test_config_verbose_parsing(clean_env):
    """Test that VERBOSE boolean parsing works correctly."""
    for verbose_value in ["true", "True", "TRUE", "1", "yes"]:
        clean_env.setenv("VERBOSE", verbose_value)
        assert Config.from_env().verbose is True, f"Expected True for VERBOSE={verbose_value}"

    for verbose_value in ["false", "0", "no", ""]:
        clean_env.setenv("VERBOSE", verbose_value)
        assert Config.from_env().verbose is False, f"Expected False for VERBOSE={verbose_value}"


def test_load_check_configs(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text(VALID_CONFIG)

    checks = load_check_configs(path)

    assert list(checks) == ["example", "over_tcp"]

    example = checks["example"]
    assert example.resolver == "8.8.8.8:53"
    assert example.resolver_timeout == "2s"
    assert example.resolve == "example.com"
    assert example.use_tcp is False
    assert example.ignore_ttl is False
    assert example.expect.answer_section == ("example.com. 300 IN A 93.184.216.34",)
    assert example.expect.authority_section == ()
    assert example.expect.additional_section == ()

    over_tcp = checks["over_tcp"]
    assert over_tcp.use_tcp is True
    assert over_tcp.query_type == "AAAA"
    assert over_tcp.ignore_ttl is True
    assert over_tcp.resolver_timeout == ""


def test_load_check_configs_missing_file(tmp_path):
    with pytest.raises(ValueError, match="Cannot read config file"):
        load_check_configs(tmp_path / "missing.yml")


def test_load_check_configs_invalid_yaml(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("checks: [unclosed")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_check_configs(path)


def test_parse_check_configs_empty():
    assert parse_check_configs(None) == {}
    assert parse_check_configs({"checks": None}) == {}


def test_parse_check_configs_numeric_timeout_kept_as_string():
    """Test that a bare number is passed on as text for duration parsing."""
    checks = parse_check_configs(
        {"checks": {"example": {"resolver": "1.1.1.1", "resolve": "a.", "resolver_timeout": 5}}}
    )

    assert checks["example"].resolver_timeout == "5"


@pytest.mark.parametrize(
    "data,message",
    [
        (["not", "a", "mapping"], "Config must be a mapping"),
        ({"checks": ["example"]}, "'checks' must be a mapping"),
        ({"checks": {"example": "8.8.8.8"}}, "Check example must be a mapping"),
        ({"checks": {"example": {"expect": []}}}, "'expect' must be a mapping"),
        (
            {"checks": {"example": {"expect": {"answer_section": "a. 1 IN A 192.0.2.1"}}}},
            "'expect.answer_section' must be a list of strings",
        ),
        ({"checks": {"example": {"use_tcp": "yes"}}}, "'use_tcp' must be a boolean"),
    ],
)
def test_parse_check_configs_invalid(data, message):
    with pytest.raises(ValueError, match=message):
        parse_check_configs(data)
