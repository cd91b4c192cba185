"""
Course identifier rules: letters first, then digits (think "CSCI200").
"""
from dataclasses import dataclass
from typing import Optional

_LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
_DIGITS = frozenset("0123456789")
WHITESPACE = " \t\r\n"


def is_valid_course_id(token: str) -> bool:
    """
    Check that a token is one or more letters followed by one or more digits.

    Only ASCII letters and digits are accepted. A letter after the first
    digit, or any other character, rejects the token.

    Examples:
        CSCI200 → True
        200CSCI → False
        CS1A → False
        CSCI → False
    """
    if not token:
        return False

    has_letter = False
    has_digit = False

    for ch in token:
        if ch in _LETTERS:
            if has_digit:
                return False
            has_letter = True
        elif ch in _DIGITS:
            has_digit = True
        else:
            return False

    return has_letter and has_digit


def to_upper_ascii(text: str) -> str:
    """Upper-case ASCII letters only; other characters are left as they are."""
    return "".join(ch.upper() if ch in _LETTERS else ch for ch in text)


def normalize_course_id(token: str) -> str:
    """Trim whitespace and upper-case a raw course id token."""
    return to_upper_ascii(token.strip(WHITESPACE))


@dataclass
class NormalizedCourseId:
    """A cleaned-up course id typed by a user."""
    course_id: str
    was_trimmed: bool = False


def normalize_course_id_input(text: str) -> Optional[NormalizedCourseId]:
    """
    Clean up a user-typed course id for lookup.

    Keeps the leading letters and then the digits, dropping whatever follows.
    A single trailing comma (pasted from a catalog line) is ignored.

    Examples:
        " csci200 " → CSCI200 (was_trimmed=False)
        "csci200, Intro" → CSCI200 (was_trimmed=True)
        "200" → None

    Returns:
        NormalizedCourseId, or None if nothing usable remains
    """
    cleaned = normalize_course_id(text)
    if cleaned.endswith(","):
        cleaned = cleaned[:-1].strip(WHITESPACE)
    if not cleaned:
        return None

    parsed = []
    has_digit = False
    for ch in cleaned:
        if ch in _LETTERS:
            if has_digit:
                break
            parsed.append(ch)
        elif ch in _DIGITS:
            has_digit = True
            parsed.append(ch)
        else:
            break

    course_id = "".join(parsed)
    if not is_valid_course_id(course_id):
        return None

    return NormalizedCourseId(course_id=course_id, was_trimmed=course_id != cleaned)
