"""
Offline password strength analysis.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from passeval.strength.analyzer import analyze
from passeval.strength.models import (
    CRITERIA_INFO,
    Criteria,
    CrackTime,
    StrengthLevel,
    StrengthReport,
)

__all__ = [
    "analyze",
    "CRITERIA_INFO",
    "Criteria",
    "CrackTime",
    "StrengthLevel",
    "StrengthReport",
]
