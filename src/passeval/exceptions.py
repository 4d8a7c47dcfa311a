"""
Exception hierarchy for password evaluation.

None of these exceptions ever carry the password, its hash or the hash
suffix in their message.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class PasswordEvaluatorError(Exception):
    """Base class for all evaluator errors."""


class InvalidInputError(PasswordEvaluatorError, ValueError):
    """Password is missing, not a string, or outside the accepted length."""


class UpstreamError(PasswordEvaluatorError):
    """The Pwned Passwords range API could not be queried.

    Covers network errors, timeouts and non-2xx responses.
    """

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class MalformedResponseError(PasswordEvaluatorError):
    """A range response line is not of the form ``SUFFIX:COUNT``."""


class PasswordTooShortError(InvalidInputError):
    """Password is shorter than the minimum accepted for breach verification."""


class ConfigurationError(PasswordEvaluatorError):
    """Breach-check settings are invalid (for example an out-of-range timeout)."""
