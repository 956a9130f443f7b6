"""Configuration module for the DNS check probe.

Process settings come from environment variables; the checks themselves
are read from a YAML file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from src.models.check import CheckConfig, ExpectConfig


_TRUE_VALUES = ("true", "1", "yes")


@dataclass
class Config:
    """Process configuration loaded from environment variables."""

    config_file: str
    error_reports_dir: str
    default_resolver_timeout: str
    default_query_type: str
    verbose: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If a variable is set to an invalid value.

        Returns:
            Config: Validated configuration instance.
        """
        config_file = os.getenv("CONFIG_FILE", "config.yml")
        if not config_file.strip():
            raise ValueError("CONFIG_FILE must not be empty")

        error_reports_dir = os.getenv("ERROR_REPORTS_DIR", "").strip()

        default_resolver_timeout = (
            os.getenv("DEFAULT_RESOLVER_TIMEOUT", "5s").strip() or "5s"
        )
        default_query_type = os.getenv("DEFAULT_QUERY_TYPE", "A").strip() or "A"

        verbose = os.getenv("VERBOSE", "false").lower() in _TRUE_VALUES

        return cls(
            config_file=config_file,
            error_reports_dir=error_reports_dir,
            default_resolver_timeout=default_resolver_timeout,
            default_query_type=default_query_type,
            verbose=verbose,
        )


def load_check_configs(path: str | Path) -> dict[str, CheckConfig]:
    """Load check configurations from a YAML file.

    Args:
        path: Path to the YAML file with a top-level "checks" mapping.

    Returns:
        dict[str, CheckConfig]: Checks keyed by name, in file order.

    Raises:
        ValueError: If the file cannot be read or is structurally invalid.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ValueError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

    return parse_check_configs(data)


def parse_check_configs(data: object) -> dict[str, CheckConfig]:
    """Build check configurations from already-parsed YAML data.

    Raises:
        ValueError: If the data is structurally invalid.
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping with a 'checks' key")

    checks = data.get("checks") or {}
    if not isinstance(checks, dict):
        raise ValueError("'checks' must be a mapping of check name to settings")

    return {str(name): _parse_check(str(name), raw) for name, raw in checks.items()}


def _parse_check(name: str, raw: object) -> CheckConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"Check {name} must be a mapping")

    expect = raw.get("expect")
    if expect is None:
        expect = {}
    if not isinstance(expect, dict):
        raise ValueError(f"Check {name}: 'expect' must be a mapping")

    return CheckConfig(
        resolver=_scalar(raw.get("resolver")),
        resolve=_scalar(raw.get("resolve")),
        resolver_timeout=_scalar(raw.get("resolver_timeout")),
        use_tcp=_flag(name, raw, "use_tcp"),
        query_type=_scalar(raw.get("query_type")),
        ignore_ttl=_flag(name, raw, "ignore_ttl"),
        expect=ExpectConfig(
            answer_section=_string_list(name, expect, "answer_section"),
            authority_section=_string_list(name, expect, "authority_section"),
            additional_section=_string_list(name, expect, "additional_section"),
        ),
    )


def _flag(name: str, raw: dict, key: str) -> bool:
    value = raw.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"Check {name}: '{key}' must be a boolean")
    return value


def _scalar(value: object) -> str:
    return "" if value is None else str(value)


def _string_list(name: str, expect: dict, key: str) -> list[str]:
    values = expect.get(key)
    if values is None:
        return []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"Check {name}: 'expect.{key}' must be a list of strings")
    return values
