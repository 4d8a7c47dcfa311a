"""
Tests for the evaluator facade.
"""

import asyncio
import logging

import pytest

import passeval.evaluator

from passeval.config import EvaluatorConfig
from passeval.evaluator import (
    MESSAGE_INVALID,
    MESSAGE_TOO_SHORT,
    MESSAGE_VERIFY_FAILED,
    PasswordEvaluator,
    user_message,
)
from passeval.exceptions import (
    ConfigurationError,
    InvalidInputError,
    PasswordTooShortError,
    UpstreamError,
)
from passeval.hibp.client import BreachClient
from passeval.hibp.models import BreachReport, RiskLevel
from passeval.strength.models import StrengthLevel

from conftest import PASSWORD, PASSWORD_SUFFIX


class RecordingFactory:
    """Client factory that remembers the clients it built."""

    def __init__(self, base_url: str = "http://127.0.0.1:1", timeout: float = 10.0):
        self.base_url = base_url
        self.timeout = timeout
        self.clients: list[BreachClient] = []

    def __call__(self) -> BreachClient:
        client = BreachClient(api_base=self.base_url, timeout=self.timeout)
        self.clients.append(client)
        return client


@pytest.fixture
def config():
    return EvaluatorConfig()


class TestEvaluate:

    @pytest.mark.parametrize("password", ["", None])
    def test_empty_input_gives_zero_report(self, config, password):
        report = PasswordEvaluator(config=config).evaluate(password)
        assert report.score == 0
        assert report.strength == StrengthLevel.NONE
        assert report.feedback == []

    def test_non_string_rejected(self, config):
        with pytest.raises(InvalidInputError):
            PasswordEvaluator(config=config).evaluate(12345678)

    def test_too_long_rejected(self, config):
        with pytest.raises(InvalidInputError):
            PasswordEvaluator(config=config).evaluate("x" * 1001)

    def test_delegates_to_analyzer(self, config):
        report = PasswordEvaluator(config=config).evaluate("abc123")
        assert report.score == 42


class TestVerify:

    @pytest.mark.parametrize("password", ["", "a", "abc"])
    async def test_short_password_rejected_before_client(self, config, password):
        factory = RecordingFactory()
        evaluator = PasswordEvaluator(config=config, client_factory=factory)

        with pytest.raises(PasswordTooShortError):
            await evaluator.verify(password)

        assert factory.clients == []

    async def test_non_string_rejected(self, config):
        factory = RecordingFactory()
        evaluator = PasswordEvaluator(config=config, client_factory=factory)

        with pytest.raises(InvalidInputError):
            await evaluator.verify(None)

        assert factory.clients == []

    async def test_delegates_to_client(self, config, range_stub):
        range_stub.body = f"{PASSWORD_SUFFIX}:9545824\n"
        factory = RecordingFactory(range_stub.base_url)
        evaluator = PasswordEvaluator(config=config, client_factory=factory)

        report = await evaluator.verify(PASSWORD)

        assert report.exposed
        assert report.count == 9545824
        assert len(range_stub.requests) == 1
        assert factory.clients[0]._session is None

    async def test_four_characters_accepted(self, config, range_stub):
        factory = RecordingFactory(range_stub.base_url)
        evaluator = PasswordEvaluator(config=config, client_factory=factory)

        report = await evaluator.verify("abcd")

        assert not report.exposed
        assert len(range_stub.requests) == 1

    async def test_upstream_error_propagates(self, config, range_stub, caplog):
        range_stub.status = 502
        evaluator = PasswordEvaluator(
            config=config, client_factory=RecordingFactory(range_stub.base_url)
        )

        with caplog.at_level(logging.DEBUG, logger="passeval"):
            with pytest.raises(UpstreamError) as exc_info:
                await evaluator.verify(PASSWORD)

        assert exc_info.value.status == 502
        # Reporting the failure is left to the caller
        assert [r for r in caplog.records if r.levelno >= logging.ERROR] == []

    async def test_concurrent_checks_are_independent(self, config, range_stub):
        range_stub.body = f"{PASSWORD_SUFFIX}:7\n"
        evaluator = PasswordEvaluator(
            config=config, client_factory=RecordingFactory(range_stub.base_url)
        )

        reports = await asyncio.gather(
            evaluator.verify(PASSWORD),
            evaluator.verify("another password"),
        )

        assert [r.count for r in reports] == [7, 0]
        assert len(range_stub.requests) == 2

    async def test_cancellation_releases_client(self, config, range_stub):
        range_stub.delay = 1.0
        factory = RecordingFactory(range_stub.base_url)
        evaluator = PasswordEvaluator(config=config, client_factory=factory)

        task = asyncio.create_task(evaluator.verify(PASSWORD))
        while not range_stub.requests:
            await asyncio.sleep(0.01)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert factory.clients[0]._session is None

    def test_default_client_uses_configured_timeout(self):
        evaluator = PasswordEvaluator(config=EvaluatorConfig(request_timeout=3.5))
        client = evaluator._default_client()
        assert client.timeout == 3.5
        assert client.api_base == BreachClient.PWNED_PASSWORDS_API


class TestEnvironmentConfig:

    def test_config_loaded_on_first_use(self, monkeypatch):
        monkeypatch.setenv("PASSEVAL_REQUEST_TIMEOUT", "2")
        evaluator = PasswordEvaluator()

        assert evaluator._config is None
        assert evaluator.config.request_timeout == 2.0

    @pytest.mark.parametrize("value", ["60", "0", "-1", "abc"])
    async def test_invalid_timeout_blocks_breach_check(self, monkeypatch, value):
        monkeypatch.setenv("PASSEVAL_REQUEST_TIMEOUT", value)
        evaluator = PasswordEvaluator()

        with pytest.raises(ConfigurationError) as exc_info:
            await evaluator.verify(PASSWORD)

        assert "timeout" in str(exc_info.value).lower()
        assert user_message(exc_info.value) == MESSAGE_VERIFY_FAILED

    @pytest.mark.parametrize("value", ["60", "abc"])
    def test_invalid_timeout_does_not_block_strength(self, monkeypatch, value):
        monkeypatch.setenv("PASSEVAL_REQUEST_TIMEOUT", value)
        monkeypatch.setenv("PASSEVAL_SERVER_PORT", "not-a-port")
        monkeypatch.setattr(passeval.evaluator, "_default_evaluator", None)

        assert PasswordEvaluator().evaluate("password").score == 46
        assert passeval.evaluator.evaluate("password").score == 46


def test_user_message_is_generic():
    assert user_message(PasswordTooShortError("short")) == MESSAGE_TOO_SHORT
    assert user_message(InvalidInputError("bad")) == MESSAGE_INVALID
    assert user_message(UpstreamError("HTTP 500", status=500)) == MESSAGE_VERIFY_FAILED
    assert user_message(ConfigurationError("bad timeout")) == MESSAGE_VERIFY_FAILED
    assert user_message(RuntimeError("boom")) == MESSAGE_VERIFY_FAILED


@pytest.mark.parametrize(
    "count,level",
    [
        (0, RiskLevel.SAFE),
        (1, RiskLevel.LOW),
        (10, RiskLevel.MEDIUM),
        (100, RiskLevel.HIGH),
        (10000, RiskLevel.CRITICAL),
    ],
)
def test_breach_report_invariants(count, level):
    report = BreachReport(count=count)
    assert report.exposed == (count > 0)
    assert report.risk_level == level


def test_risk_description_pluralizes():
    assert "1 vez" in BreachReport(count=1).risk_description
    assert "9,545,824 veces" in BreachReport(count=9545824).risk_description
