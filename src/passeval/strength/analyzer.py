"""
Offline password strength analyzer.

Scores a password from its length, character class diversity and a few
structural checks, then caps the score by its brute-force entropy. All
functions are pure.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import math
import re

from passeval.strength.models import (
    Criteria,
    CrackTime,
    StrengthLevel,
    StrengthReport,
)

MIN_LENGTH = 12

# Alphabet sizes per character class
LOWER_CHARSET = 26
UPPER_CHARSET = 26
DIGIT_CHARSET = 10
SYMBOL_CHARSET = 32

COMMON_PASSWORDS = frozenset({
    "password", "123456", "12345678", "qwerty", "abc123", "monkey", "1234567",
    "letmein", "trustno1", "dragon", "baseball", "iloveyou", "master", "sunshine",
    "ashley", "bailey", "shadow", "123123", "654321", "superman", "qazwsx",
})

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_SYMBOL_RE = re.compile(r"[^A-Za-z0-9]")

# Three-character ascending runs: abc..xyz and 012..789
_SEQUENCES = [
    alphabet[i:i + 3]
    for alphabet in ("abcdefghijklmnopqrstuvwxyz", "0123456789")
    for i in range(len(alphabet) - 2)
]
_SEQUENTIAL_RE = re.compile("|".join(_SEQUENCES), re.IGNORECASE)
_REPEATED_RE = re.compile(r"(.)\1{2,}", re.DOTALL)

# Offline attack model: 10 trillion guesses per second
ATTEMPTS_PER_SECOND = 1e13

# (upper bound in seconds, unit size in seconds, unit name)
_CRACK_TIME_UNITS = [
    (60, 1, "segundos"),
    (3600, 60, "minutos"),
    (86400, 3600, "horas"),
    (2592000, 86400, "días"),
    (31536000, 2592000, "meses"),
    (315360000, 31536000, "años"),
    (3153600000, 315360000, "décadas"),
    (31536000000, 3153600000, "siglos"),
]

FEEDBACK_LENGTH = "Aumenta la longitud a al menos 12 caracteres para mayor seguridad."
FEEDBACK_CASE = "Combina letras mayúsculas y minúsculas para incrementar la complejidad."
FEEDBACK_DIGITS = "Agrega números para mejorar la fortaleza de la contraseña."
FEEDBACK_SYMBOLS = "Incluye símbolos especiales (!@#$%^&*) para máxima seguridad."
FEEDBACK_COMMON = "Esta contraseña es muy común. Elige una combinación única y personal."
FEEDBACK_SEQUENTIAL = 'Evita secuencias predecibles como "abc" o "123".'
FEEDBACK_REPEATED = "Evita repetir el mismo carácter múltiples veces seguidas."
FEEDBACK_PASSPHRASE = (
    "Considera usar una frase de contraseña (passphrase) compuesta por "
    "varias palabras aleatorias."
)
FEEDBACK_EXCELLENT = (
    "¡Excelente! Esta contraseña cumple con los estándares de seguridad recomendados."
)


def charset_size(password: str) -> int:
    """Sum the alphabet sizes of the character classes present.

    Returns 1 when no class is present so the entropy stays defined.
    """
    size = 0
    if _LOWER_RE.search(password):
        size += LOWER_CHARSET
    if _UPPER_RE.search(password):
        size += UPPER_CHARSET
    if _DIGIT_RE.search(password):
        size += DIGIT_CHARSET
    if _SYMBOL_RE.search(password):
        size += SYMBOL_CHARSET
    return size or 1


def entropy_bits(password: str) -> float:
    """Brute-force entropy in bits: length * log2(charset size)."""
    return len(password) * math.log2(charset_size(password))


def is_common_password(password: str) -> bool:
    return password.lower() in COMMON_PASSWORDS


def has_sequential_chars(password: str) -> bool:
    return _SEQUENTIAL_RE.search(password) is not None


def has_repeated_chars(password: str) -> bool:
    return _REPEATED_RE.search(password) is not None


def evaluate_criteria(password: str) -> Criteria:
    """Evaluate the eight structural criteria."""
    return Criteria(
        length=len(password) >= MIN_LENGTH,
        has_lower=_LOWER_RE.search(password) is not None,
        has_upper=_UPPER_RE.search(password) is not None,
        has_digit=_DIGIT_RE.search(password) is not None,
        has_symbol=_SYMBOL_RE.search(password) is not None,
        not_common=not is_common_password(password),
        no_sequential=not has_sequential_chars(password),
        no_repeated=not has_repeated_chars(password),
    )


def calculate_score(checks: Criteria, length: int, entropy: float) -> int:
    """Compute the 0-100 score.

    Length earns up to 30 points, each character class 10 and each
    avoided pattern 10. Low entropy then caps the total.
    """
    score = min(30, length * 2)

    for met in (checks.has_lower, checks.has_upper, checks.has_digit, checks.has_symbol):
        if met:
            score += 10

    for met in (checks.not_common, checks.no_sequential, checks.no_repeated):
        if met:
            score += 10

    if entropy < 28:
        score = min(score, 30)
    elif entropy < 36:
        score = min(score, 50)
    elif entropy < 60:
        score = min(score, 70)

    return min(100, score)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def estimate_crack_time(entropy: float) -> CrackTime:
    """Average time to brute force a password of the given entropy."""
    try:
        combinations = 2.0 ** entropy
    except OverflowError:
        combinations = math.inf

    # Half the keyspace on average
    seconds = combinations / (2 * ATTEMPTS_PER_SECOND)

    if seconds < 1:
        return CrackTime(display="Instantáneo", seconds=seconds)

    for limit, unit, name in _CRACK_TIME_UNITS:
        if seconds < limit:
            return CrackTime(
                display=f"{_round_half_up(seconds / unit)} {name}",
                seconds=seconds,
            )

    return CrackTime(display="Miles de años", seconds=seconds)


def generate_feedback(checks: Criteria, entropy: float) -> list[str]:
    """Build recommendations in a fixed order."""
    feedback = []

    if not checks.length:
        feedback.append(FEEDBACK_LENGTH)
    if not checks.has_upper or not checks.has_lower:
        feedback.append(FEEDBACK_CASE)
    if not checks.has_digit:
        feedback.append(FEEDBACK_DIGITS)
    if not checks.has_symbol:
        feedback.append(FEEDBACK_SYMBOLS)
    if not checks.not_common:
        feedback.append(FEEDBACK_COMMON)
    if not checks.no_sequential:
        feedback.append(FEEDBACK_SEQUENTIAL)
    if not checks.no_repeated:
        feedback.append(FEEDBACK_REPEATED)
    if entropy < 50:
        feedback.append(FEEDBACK_PASSPHRASE)

    if not feedback:
        feedback.append(FEEDBACK_EXCELLENT)

    return feedback


def analyze(password: str) -> StrengthReport:
    """Analyze a password's structural strength.

    Args:
        password: Password to analyze (NOT stored or logged)

    Returns:
        StrengthReport; the zero report with strength ``none`` when
        the password is empty
    """
    if not password:
        return StrengthReport()

    entropy = entropy_bits(password)
    checks = evaluate_criteria(password)
    score = calculate_score(checks, len(password), entropy)

    return StrengthReport(
        score=score,
        strength=StrengthLevel.from_score(score),
        entropy=entropy,
        crack_time=estimate_crack_time(entropy),
        checks=checks,
        feedback=generate_feedback(checks, entropy),
    )
