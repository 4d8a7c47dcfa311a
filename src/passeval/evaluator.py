"""
Evaluator facade.

Validates input and dispatches to the strength analyzer and, on demand,
the breach client. Neither path depends on the other's result.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
from typing import Callable

from passeval.config import EvaluatorConfig
from passeval.exceptions import (
    ConfigurationError,
    InvalidInputError,
    PasswordTooShortError,
)
from passeval.hibp.client import MAX_PASSWORD_LENGTH, BreachClient
from passeval.hibp.models import BreachReport
from passeval.strength.analyzer import analyze
from passeval.strength.models import StrengthReport

# Shortest password accepted for a breach lookup
MIN_VERIFY_LENGTH = 4

MESSAGE_TOO_SHORT = "La contraseña es demasiado corta para verificar"
MESSAGE_INVALID = "Contraseña inválida"
MESSAGE_VERIFY_FAILED = "No se pudo verificar la exposición. Por favor, intenta de nuevo."


class PasswordEvaluator:
    """Coordinates strength analysis and breach verification."""

    def __init__(
        self,
        config: EvaluatorConfig | None = None,
        client_factory: Callable[[], BreachClient] | None = None,
    ):
        """Initialize the evaluator.

        Args:
            config: Evaluator configuration (default: from environment,
                loaded on first breach check)
            client_factory: Builds a BreachClient per verification
        """
        self._config = config
        self._client_factory = client_factory or self._default_client

    @property
    def config(self) -> EvaluatorConfig:
        if self._config is None:
            self._config = EvaluatorConfig.from_env()
        return self._config

    def _default_client(self) -> BreachClient:
        errors = self.config.validate_client()
        if errors:
            raise ConfigurationError("; ".join(errors))
        return BreachClient(timeout=self.config.request_timeout)

    def evaluate(self, password: str | None) -> StrengthReport:
        """Analyze password strength synchronously.

        Empty input yields the zero report rather than an error.
        """
        if password is None:
            password = ""
        if not isinstance(password, str):
            raise InvalidInputError("Password must be a string")
        if len(password) > MAX_PASSWORD_LENGTH:
            raise InvalidInputError(
                f"Password must be at most {MAX_PASSWORD_LENGTH} characters"
            )
        return analyze(password)

    async def verify(self, password: str) -> BreachReport:
        """Check the password against the breach corpus.

        Raises:
            InvalidInputError: not a string or fewer than 4 characters
            ConfigurationError: the request timeout setting is invalid
            UpstreamError: the range API could not be queried
        """
        if not isinstance(password, str):
            raise InvalidInputError("Password must be a string")
        if len(password) < MIN_VERIFY_LENGTH:
            raise PasswordTooShortError(
                f"Password must be at least {MIN_VERIFY_LENGTH} characters to verify"
            )

        async with self._client_factory() as client:
            return await client.check_password(password)

    def verify_sync(self, password: str) -> BreachReport:
        """Synchronous wrapper around verify()."""
        return asyncio.run(self.verify(password))


def user_message(error: BaseException) -> str:
    """Map an error to a generic, non-revealing user message."""
    if isinstance(error, PasswordTooShortError):
        return MESSAGE_TOO_SHORT
    if isinstance(error, InvalidInputError):
        return MESSAGE_INVALID
    return MESSAGE_VERIFY_FAILED


_default_evaluator: PasswordEvaluator | None = None


def _get_default_evaluator() -> PasswordEvaluator:
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = PasswordEvaluator()
    return _default_evaluator


def evaluate(password: str | None) -> StrengthReport:
    """Analyze password strength with the default evaluator."""
    return _get_default_evaluator().evaluate(password)


async def verify(password: str) -> BreachReport:
    """Check password exposure with the default evaluator."""
    return await _get_default_evaluator().verify(password)
