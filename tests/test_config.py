"""Tests for startup configuration."""

import pytest

from bamboohr_mcp.core.config import Settings, load_settings
from bamboohr_mcp.core.errors import ConfigurationError

REQUIRED = {"BAMBOOHR_COMPANY": "mycompany", "BAMBOOHR_API_KEY": "sk_12345"}


def test_required_settings_only():
    settings = load_settings(REQUIRED)

    assert settings == Settings(company="mycompany", api_key="sk_12345")
    assert settings.payload_variant == "typed"
    assert settings.timeout == 30
    assert settings.gateway_url == "https://mycompany.bamboohr.com/api/gateway.php/mycompany/v1"
    assert settings.v1_url == "https://mycompany.bamboohr.com/api/v1"


@pytest.mark.parametrize("missing", ["BAMBOOHR_COMPANY", "BAMBOOHR_API_KEY"])
def test_missing_required_variable(missing):
    environ = {k: v for k, v in REQUIRED.items() if k != missing}

    with pytest.raises(ConfigurationError, match=missing):
        load_settings(environ)


def test_blank_required_variable_counts_as_missing():
    with pytest.raises(ConfigurationError, match="BAMBOOHR_API_KEY"):
        load_settings({**REQUIRED, "BAMBOOHR_API_KEY": "   "})


def test_optional_settings():
    settings = load_settings(
        {
            **REQUIRED,
            "BAMBOOHR_PAYLOAD_VARIANT": "Flat",
            "BAMBOOHR_TIMEOUT": "10",
            "BAMBOOHR_LOG_LEVEL": "debug",
        }
    )

    assert settings.payload_variant == "flat"
    assert settings.timeout == 10.0
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("BAMBOOHR_PAYLOAD_VARIANT", "v3"),
        ("BAMBOOHR_TIMEOUT", "soon"),
        ("BAMBOOHR_TIMEOUT", "0"),
    ],
)
def test_invalid_optional_settings(name, value):
    with pytest.raises(ConfigurationError, match=name):
        load_settings({**REQUIRED, name: value})


def test_api_key_is_not_in_repr():
    assert "sk_12345" not in repr(load_settings(REQUIRED))


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("BAMBOOHR_COMPANY", "envco")
    monkeypatch.setenv("BAMBOOHR_API_KEY", "envkey")

    assert load_settings().company == "envco"
