"""
Pwned Passwords range API client.

Implements the k-anonymity lookup: only the first 5 characters of the
password's SHA-1 hash are sent, and the suffix is matched locally
against the returned bucket.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import hashlib
import logging
import re
from typing import Iterator

import aiohttp

from passeval.exceptions import (
    InvalidInputError,
    MalformedResponseError,
    UpstreamError,
)
from passeval.hibp.models import BreachReport

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 5
MAX_PASSWORD_LENGTH = 1000

_RANGE_LINE_RE = re.compile(r"^([0-9A-Fa-f]{35}):(\d+)$")


def sha1_hex(password: str) -> str:
    """Return uppercase SHA-1 hex string for the given password."""
    return hashlib.sha1(password.encode("utf-8")).hexdigest().upper()


def split_hash(password_hash: str) -> tuple[str, str]:
    """Split a SHA-1 hex digest into (prefix, suffix)."""
    return password_hash[:PREFIX_LENGTH], password_hash[PREFIX_LENGTH:]


def _parse_range_line(line: str) -> tuple[str, int]:
    match = _RANGE_LINE_RE.match(line)
    if not match:
        raise MalformedResponseError("Range line is not SUFFIX:COUNT")
    return match.group(1).upper(), int(match.group(2))


def parse_range_response(text: str) -> Iterator[tuple[str, int]]:
    """Parse a range response body into (suffix, count) pairs.

    Malformed lines are skipped.
    """
    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            yield _parse_range_line(line)
        except MalformedResponseError:
            logger.debug(f"Skipping malformed range line {lineno}")


def find_suffix(text: str, suffix: str) -> int:
    """Return the count recorded for suffix in a range response, or 0."""
    suffix = suffix.upper()
    for hash_suffix, count in parse_range_response(text):
        if hash_suffix == suffix:
            return count
    return 0


def validate_password(password: str) -> None:
    """Raise InvalidInputError unless password is a 1..1000 character string."""
    if not isinstance(password, str) or not password:
        raise InvalidInputError("Password must be a non-empty string")
    if len(password) > MAX_PASSWORD_LENGTH:
        raise InvalidInputError(
            f"Password must be at most {MAX_PASSWORD_LENGTH} characters"
        )


class BreachClient:
    """Client for the Pwned Passwords range API.

    Each check performs exactly one GET and keeps no state between
    calls other than the HTTP session.
    """

    PWNED_PASSWORDS_API = "https://api.pwnedpasswords.com"
    USER_AGENT = "Password-Evaluator-App"
    DEFAULT_TIMEOUT = 10.0  # seconds, whole request

    def __init__(
        self,
        api_base: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            api_base: Range API base URL (default: public Pwned Passwords API)
            timeout: Total seconds allowed per check, at most 10.0 (default: 10.0)

        Raises:
            ValueError: timeout is not in (0, 10.0]
        """
        if timeout is None:
            timeout = self.DEFAULT_TIMEOUT
        if not 0 < timeout <= self.DEFAULT_TIMEOUT:
            raise ValueError(
                f"timeout must be between 0 and {self.DEFAULT_TIMEOUT:g} seconds"
            )

        self.api_base = (api_base or self.PWNED_PASSWORDS_API).rstrip("/")
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session exists."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "BreachClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _fetch_range(self, prefix: str) -> str:
        """GET the bucket for a hash prefix and return the body text."""
        session = await self._ensure_session()

        url = f"{self.api_base}/range/{prefix}"
        headers = {
            "User-Agent": self.USER_AGENT,
            "Add-Padding": "true",
        }

        logger.debug(f"Querying range bucket {prefix}")

        try:
            async with session.get(
                url,
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if not 200 <= response.status < 300:
                    logger.warning(f"Range API returned HTTP {response.status}")
                    raise UpstreamError(
                        f"Range API error: HTTP {response.status}",
                        status=response.status,
                    )
                return await response.text()

        except asyncio.TimeoutError as e:
            logger.warning(f"Range API timed out after {self.timeout:g}s")
            raise UpstreamError("Range API request timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Range API request failed: {type(e).__name__}")
            raise UpstreamError(f"Range API request failed: {type(e).__name__}") from e

    async def check_password(self, password: str) -> BreachReport:
        """Check if a password has been exposed in data breaches.

        Uses k-anonymity model - only the first 5 characters of the
        SHA-1 hash are sent to the API. The full password never leaves
        this system.

        Args:
            password: Password to check (NOT stored or logged)

        Returns:
            BreachReport with exposure count

        Raises:
            InvalidInputError: password is empty, not a string or too long
            UpstreamError: network error, timeout or non-2xx response
        """
        validate_password(password)

        prefix, suffix = split_hash(sha1_hex(password))

        # Clear the password from memory
        password = None  # noqa: F841

        body = await self._fetch_range(prefix)

        return BreachReport(count=find_suffix(body, suffix), hash_prefix=prefix)


def check_password_sync(password: str, timeout: float | None = None) -> BreachReport:
    """Synchronous wrapper for checking password exposure.

    Args:
        password: Password to check
        timeout: Total seconds allowed for the check

    Returns:
        BreachReport
    """
    async def _check():
        async with BreachClient(timeout=timeout) as client:
            return await client.check_password(password)

    return asyncio.run(_check())
