"""
Tests for environment configuration.
"""

from passeval.config import EvaluatorConfig


def test_defaults():
    config = EvaluatorConfig()
    assert config.request_timeout == 10.0
    assert config.server_port == 8080
    assert config.validate() == []


def test_from_env(monkeypatch):
    monkeypatch.setenv("PASSEVAL_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("PASSEVAL_SERVER_HOST", "127.0.0.1")
    monkeypatch.setenv("PASSEVAL_SERVER_PORT", "9000")
    monkeypatch.setenv("PASSEVAL_LOG_LEVEL", "debug")

    config = EvaluatorConfig.from_env()

    assert config.request_timeout == 5.0
    assert config.server_host == "127.0.0.1"
    assert config.server_port == 9000
    assert config.log_level == "DEBUG"
    assert config.validate() == []


def test_validate_reports_errors():
    config = EvaluatorConfig(request_timeout=30, server_port=0, log_level="LOUD")
    errors = config.validate()
    assert len(errors) == 3


def test_to_dict():
    assert EvaluatorConfig().to_dict()["request_timeout"] == 10.0


def test_from_env_tolerates_unparseable_numbers(monkeypatch):
    monkeypatch.setenv("PASSEVAL_REQUEST_TIMEOUT", "abc")
    monkeypatch.setenv("PASSEVAL_SERVER_PORT", "http")

    config = EvaluatorConfig.from_env()

    assert config.request_timeout == 10.0
    assert config.server_port == 8080
    assert config.validate_client() == [
        "PASSEVAL_REQUEST_TIMEOUT is not a valid number: 'abc'"
    ]
    assert config.validate() == [
        "PASSEVAL_REQUEST_TIMEOUT is not a valid number: 'abc'",
        "PASSEVAL_SERVER_PORT is not a valid number: 'http'",
    ]


def test_validate_client_ignores_server_settings():
    config = EvaluatorConfig(server_port=0, log_level="LOUD")
    assert config.validate_client() == []
    assert len(config.validate()) == 2


def test_validate_client_checks_timeout_bound():
    assert len(EvaluatorConfig(request_timeout=11).validate_client()) == 1
    assert len(EvaluatorConfig(request_timeout=0).validate_client()) == 1
