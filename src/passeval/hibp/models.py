"""
Data models for Pwned Passwords range lookups.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class RiskLevel(str, Enum):
    """Risk level based on password exposure."""

    SAFE = "safe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class BreachReport:
    """Result of checking a password against Pwned Passwords."""

    count: int = 0
    checked_at: datetime = field(default_factory=datetime.now)
    # Never store the actual password or the hash suffix!
    hash_prefix: str = ""  # Only first 5 chars of SHA-1

    @property
    def exposed(self) -> bool:
        """Check if password was found in breaches."""
        return self.count > 0

    @property
    def risk_level(self) -> RiskLevel:
        """Determine risk level based on occurrences."""
        if self.count == 0:
            return RiskLevel.SAFE
        elif self.count < 10:
            return RiskLevel.LOW
        elif self.count < 100:
            return RiskLevel.MEDIUM
        elif self.count < 10000:
            return RiskLevel.HIGH
        else:
            return RiskLevel.CRITICAL

    @property
    def risk_description(self) -> str:
        """Get human-readable risk description."""
        if not self.exposed:
            return "Esta contraseña no aparece en las bases de datos de filtraciones conocidas."
        times = "vez" if self.count == 1 else "veces"
        return (
            f"Esta contraseña ha aparecido {self.count:,} {times} en filtraciones de datos. "
            "No utilices esta contraseña."
        )

    def to_api_dict(self) -> dict[str, Any]:
        """Response body of the check-breach endpoint."""
        return {
            "exposed": self.exposed,
            "count": self.count,
            "checked": True,
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "exposed": self.exposed,
            "count": self.count,
            "risk_level": self.risk_level.value,
            "risk_description": self.risk_description,
            "checked_at": self.checked_at.isoformat(),
        }
