"""
Pwned Passwords integration module.

Checks passwords against known breach corpora using the k-anonymity
range API; only a 5-character hash prefix leaves the process.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from passeval.hibp.models import BreachReport, RiskLevel
from passeval.hibp.client import BreachClient, check_password_sync

__all__ = [
    "BreachClient",
    "BreachReport",
    "RiskLevel",
    "check_password_sync",
]
