from typing import List

from passgen.strength import StrengthResult


MASK_CHAR = "•"


def mask_password(password: str, visible: bool = False) -> str:
    # arată aceeași lungime, dar mascat (bullet)
    if visible:
        return password
    return MASK_CHAR * len(password)


def format_feedback(result: StrengthResult) -> List[str]:
    return [f"• {item}" for item in result.feedback]


def describe(password: str, result: StrengthResult) -> str:
    """Linia de sub parolă: numărul de caractere și eticheta de tărie."""
    return f"{len(password)} characters, strength: {result.label.value} (score {result.score}/5)"
