import re
from dataclasses import dataclass
from enum import Enum

from passgen.password_settings import CHARACTER_SETS


MAX_SCORE = 5

COMMON_PATTERNS = ("123456", "abcdef", "qwerty", "password", "admin", "letmein")

_REPEATED_CHAR = re.compile(r"(.)\1{2,}", re.DOTALL)


class StrengthLabel(str, Enum):
    VERY_WEAK = "Very Weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: StrengthLabel
    feedback: tuple = ()


def label_for_score(score: int) -> StrengthLabel:
    if score >= 5:
        return StrengthLabel.STRONG
    if score == 4:
        return StrengthLabel.GOOD
    if score == 3:
        return StrengthLabel.FAIR
    if score == 2:
        return StrengthLabel.WEAK
    return StrengthLabel.VERY_WEAK


def _join_missing(items: list) -> str:
    # "a", "a and b", "a, b and c"
    if len(items) == 1:
        return items[0]
    return ", ".join(items[:-1]) + " and " + items[-1]


def has_repeating_characters(password: str) -> bool:
    return _REPEATED_CHAR.search(password) is not None


def has_common_patterns(password: str) -> bool:
    lowered = password.lower()
    return any(pattern in lowered for pattern in COMMON_PATTERNS)


def evaluate_strength(password: str) -> StrengthResult:
    """
    Scor 0..5 din cinci criterii de tip da/nu, plus sugestii în ordinea criteriilor.
    Nu e o măsură de entropie; e doar o euristică deterministă.
    """
    if not password:
        return StrengthResult(0, StrengthLabel.VERY_WEAK, ("Password is required",))

    score = 0
    feedback = []

    # lungime
    if len(password) >= 8:
        score += 1
    else:
        feedback.append("Use at least 8 characters")

    if len(password) >= 12:
        score += 1
    elif len(password) >= 8:
        feedback.append("Consider using 12 or more characters")

    # diversitate (simbolurile se verifică mereu față de setul standard)
    classes = [
        ("lowercase letters", CHARACTER_SETS["lowercase"]),
        ("uppercase letters", CHARACTER_SETS["uppercase"]),
        ("numbers", CHARACTER_SETS["numbers"]),
        ("symbols", CHARACTER_SETS["symbols"]),
    ]
    missing = [name for name, chars in classes if not any(c in chars for c in password)]
    if len(classes) - len(missing) >= 3:
        score += 1
    else:
        feedback.append("Add " + _join_missing(missing))

    if not has_repeating_characters(password):
        score += 1
    else:
        feedback.append("Avoid repeating characters")

    if not has_common_patterns(password):
        score += 1
    else:
        feedback.append("Avoid common patterns")

    score = max(0, min(score, MAX_SCORE))
    return StrengthResult(score, label_for_score(score), tuple(feedback))
