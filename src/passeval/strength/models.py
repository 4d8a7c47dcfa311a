"""
Data models for password strength analysis.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Iterator


class StrengthLevel(str, Enum):
    """Categorical strength derived from the score."""

    NONE = "none"
    VERY_WEAK = "very-weak"
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @classmethod
    def from_score(cls, score: int) -> "StrengthLevel":
        """Bucket a 0-100 score."""
        if score < 30:
            return cls.VERY_WEAK
        elif score < 50:
            return cls.WEAK
        elif score < 70:
            return cls.MODERATE
        elif score < 85:
            return cls.STRONG
        else:
            return cls.VERY_STRONG

    @property
    def label(self) -> str:
        """User-visible label."""
        labels = {
            StrengthLevel.NONE: "Sin evaluar",
            StrengthLevel.VERY_WEAK: "Muy Débil",
            StrengthLevel.WEAK: "Débil",
            StrengthLevel.MODERATE: "Moderada",
            StrengthLevel.STRONG: "Fuerte",
            StrengthLevel.VERY_STRONG: "Muy Fuerte",
        }
        return labels[self]


# Presentation metadata per criterion: (label, description)
CRITERIA_INFO: dict[str, tuple[str, str]] = {
    "length": ("Longitud adecuada", "Mínimo 12 caracteres"),
    "has_lower": ("Minúsculas", "a-z"),
    "has_upper": ("Mayúsculas", "A-Z"),
    "has_digit": ("Números", "0-9"),
    "has_symbol": ("Símbolos", "!@#$%^&*"),
    "not_common": ("No común", "Evita contraseñas típicas"),
    "no_sequential": ("No secuencial", "Sin abc, 123"),
    "no_repeated": ("Sin repetición", "Sin aaa, 111"),
}


@dataclass
class Criteria:
    """Pass/fail state of each structural criterion."""

    length: bool = False
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    not_common: bool = False
    no_sequential: bool = False
    no_repeated: bool = False

    def items(self) -> Iterator[tuple[str, bool]]:
        """Yield (name, met) pairs in declaration order."""
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    @property
    def passed(self) -> int:
        """Number of criteria met."""
        return sum(1 for _, met in self.items() if met)

    @property
    def all_passed(self) -> bool:
        return self.passed == len(fields(self))

    def to_dict(self) -> dict[str, bool]:
        """Convert to dictionary."""
        return dict(self.items())


@dataclass
class CrackTime:
    """Estimated brute-force time."""

    display: str = ""
    seconds: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"display": self.display, "seconds": self.seconds}


@dataclass
class StrengthReport:
    """Result of analyzing a password offline."""

    score: int = 0
    strength: StrengthLevel = StrengthLevel.NONE
    entropy: float = 0.0
    crack_time: CrackTime = field(default_factory=CrackTime)
    checks: Criteria = field(default_factory=Criteria)
    feedback: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True for the report of an empty password."""
        return self.strength == StrengthLevel.NONE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "strength": self.strength.value,
            "strength_label": self.strength.label,
            "entropy": self.entropy,
            "crack_time": self.crack_time.to_dict(),
            "checks": self.checks.to_dict(),
            "feedback": list(self.feedback),
        }
