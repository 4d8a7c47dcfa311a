"""
Password Evaluator - offline strength analysis and k-anonymity breach checks.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "1.0.0"

from passeval.evaluator import PasswordEvaluator, evaluate, verify
from passeval.exceptions import (
    ConfigurationError,
    InvalidInputError,
    MalformedResponseError,
    PasswordEvaluatorError,
    PasswordTooShortError,
    UpstreamError,
)

__all__ = [
    "__version__",
    "PasswordEvaluator",
    "evaluate",
    "verify",
    "PasswordEvaluatorError",
    "ConfigurationError",
    "InvalidInputError",
    "PasswordTooShortError",
    "UpstreamError",
    "MalformedResponseError",
]
