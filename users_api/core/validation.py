"""Field rules for users, shared by the routes and the repository."""
from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from .errors import ValidationError

USER_FIELDS = ("username", "email", "password")

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MAX_SAFE_INTEGER = 2**53 - 1

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def valid_username(value: Any) -> bool:
    return isinstance(value, str) and 4 <= len(value) <= 32


def valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def valid_password(value: Any) -> bool:
    return isinstance(value, str) and 8 <= len(value) <= 256


_RULES = {
    "username": (valid_username, "Invalid user's username."),
    "email": (valid_email, "Invalid user's e-mail."),
    "password": (valid_password, "Invalid user's password length."),
}


def validate_user_fields(fields: Mapping[str, Any], partial: bool = False) -> None:
    """Check user fields in order username, email, password.

    With ``partial`` only the keys present in ``fields`` are checked; otherwise
    a missing field fails like an invalid one. Present values are always
    checked, so an empty string is rejected rather than skipped.

    Raises:
        ValidationError: for the first field that fails its rule.
    """
    for name in USER_FIELDS:
        if name not in fields and partial:
            continue
        check, message = _RULES[name]
        if not check(fields.get(name)):
            raise ValidationError(name, message)


def parse_user_id(raw: str) -> Optional[int]:
    """Parse a path id the way a JavaScript ``Number`` would, keeping safe integers only.

    Accepts decimal, fractional-with-zero-fraction and exponent literals plus
    0x/0o/0b prefixed integers, with surrounding whitespace. A blank id is 0.
    Returns None for anything that is not an integral value within
    +/- (2**53 - 1).
    """
    text = raw.strip()
    if not text:
        return 0
    if _PREFIXED_PATTERN.fullmatch(text):
        value = int(text, 0)
        return value if value <= MAX_SAFE_INTEGER else None
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number) or not number.is_integer() or abs(number) > MAX_SAFE_INTEGER:
        return None
    return int(number)
