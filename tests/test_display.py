from passgen.display import describe, format_feedback, mask_password
from passgen.strength import evaluate_strength


def test_mask_keeps_length():
    assert mask_password("secret") == "••••••"
    assert mask_password("") == ""


def test_visible_password_is_returned_as_is():
    assert mask_password("secret", visible=True) == "secret"


def test_format_feedback():
    result = evaluate_strength("aaaaaaaa")
    assert format_feedback(result) == [
        "• Consider using 12 or more characters",
        "• Add uppercase letters, numbers and symbols",
        "• Avoid repeating characters",
    ]


def test_describe():
    pw = "Tr0ub4dor&3"
    assert describe(pw, evaluate_strength(pw)) == "11 characters, strength: Good (score 4/5)"
