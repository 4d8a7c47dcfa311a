"""
Runtime configuration for the password evaluator.

The API URL, user agent, denylist and scoring constants are fixed in code;
only transport and presentation knobs are configurable here.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable

# Upper bound on a single breach verification, in seconds
MAX_REQUEST_TIMEOUT = 10.0


def _env_number(name: str, default: Any, convert: Callable[[str], Any], errors: list[str]) -> Any:
    """Read a numeric environment variable, recording parse failures."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return convert(raw)
    except ValueError:
        errors.append(f"{name} is not a valid number: {raw!r}")
        return default


@dataclass
class EvaluatorConfig:
    """Configuration for the evaluator, its client and its HTTP server."""

    request_timeout: float = MAX_REQUEST_TIMEOUT

    # Flask adapter
    server_host: str = "0.0.0.0"
    server_port: int = 8080

    log_level: str = "WARNING"

    # Environment values that could not be parsed
    load_errors: dict[str, str] = field(default_factory=dict, repr=False)

    @classmethod
    def from_env(cls) -> "EvaluatorConfig":
        """Load configuration from environment variables.

        Unparseable values fall back to their defaults and are reported
        by validate().
        """
        timeout_errors: list[str] = []
        port_errors: list[str] = []

        config = cls(
            request_timeout=_env_number(
                "PASSEVAL_REQUEST_TIMEOUT", MAX_REQUEST_TIMEOUT, float, timeout_errors
            ),
            server_host=os.environ.get("PASSEVAL_SERVER_HOST", "0.0.0.0"),
            server_port=_env_number("PASSEVAL_SERVER_PORT", 8080, int, port_errors),
            log_level=os.environ.get("PASSEVAL_LOG_LEVEL", "WARNING").upper(),
        )

        if timeout_errors:
            config.load_errors["request_timeout"] = timeout_errors[0]
        if port_errors:
            config.load_errors["server_port"] = port_errors[0]

        return config

    def validate_client(self) -> list[str]:
        """Validate the settings used by breach checks. Returns list of errors."""
        errors = []

        if "request_timeout" in self.load_errors:
            errors.append(self.load_errors["request_timeout"])
        elif not 0 < self.request_timeout <= MAX_REQUEST_TIMEOUT:
            errors.append(
                f"Request timeout must be between 0 and {MAX_REQUEST_TIMEOUT:g} seconds"
            )

        return errors

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = self.validate_client()

        if "server_port" in self.load_errors:
            errors.append(self.load_errors["server_port"])
        elif not 0 < self.server_port < 65536:
            errors.append("Server port must be between 1 and 65535")

        if not self.has_valid_log_level:
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    @property
    def has_valid_log_level(self) -> bool:
        return isinstance(logging.getLevelName(self.log_level), int)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "request_timeout": self.request_timeout,
            "server_host": self.server_host,
            "server_port": self.server_port,
            "log_level": self.log_level,
        }
