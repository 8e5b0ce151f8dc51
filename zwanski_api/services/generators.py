"""
Zwanski API: Text Generators
=============================

What:  Quote picker, password generator and lorem ipsum sizes.
How:   Immutable module-level data plus small pure functions.
Who:   Called by the /api/quote, /api/passgen and /api/lorem routes.

Query values are parsed permissively: anything unrecognized falls back to the
default instead of producing a validation error.
"""

import random
import re
import secrets
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from zwanski_api.schemas.responses import LoremResponse, PasswordResponse, QuoteResponse


# ══════════════════════════════════════════════════════════════════════════
# Quotes
# ══════════════════════════════════════════════════════════════════════════

QUOTES: Tuple[Tuple[str, str], ...] = (
    ("Security is not a product, but a process.", "Bruce Schneier"),
    ("The only secure computer is one that's turned off.", "Unknown"),
    ("Innovation distinguishes between a leader and a follower.", "Steve Jobs"),
    ("The best way to predict the future is to invent it.", "Alan Kay"),
    ("Your data is your digital life. Protect it.", "Zwanski"),
    ("Speed matters. Edge computing is the future.", "Zwanski"),
    ("Privacy by design, not by accident.", "Zwanski"),
)


def random_quote() -> QuoteResponse:
    """Pick one quote uniformly at random."""
    text, author = random.choice(QUOTES)
    return QuoteResponse(text=text, author=author)


# ══════════════════════════════════════════════════════════════════════════
# Passwords
# ══════════════════════════════════════════════════════════════════════════

PASSWORD_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "!@#$%^&*()_+-=[]{}|;:,.<>?"
)

DEFAULT_PASSWORD_LENGTH = 16
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

# Leading ASCII integer, like "20", "  20", "20chars", "-3"
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")


def parse_password_length(raw: Optional[str]) -> int:
    """
    Turn the raw `length` query value into a usable password length.

    Rules:
        - absent, empty or non-numeric → DEFAULT_PASSWORD_LENGTH (16)
        - leading integer is used: "24abc" → 24
        - result is clamped into [8, 128]: "3" → 8, "500" → 128, "0" → 8
        - only ASCII digits count: "٣٢" → 16
    """
    if raw is None:
        return DEFAULT_PASSWORD_LENGTH
    match = _LEADING_INT.match(raw)
    if match is None:
        return DEFAULT_PASSWORD_LENGTH
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    # Four or more significant digits is always outside [8, 128]
    if len(digits) > 3:
        return MIN_PASSWORD_LENGTH if sign == "-" else MAX_PASSWORD_LENGTH
    requested = -int(digits) if sign == "-" else int(digits)
    return min(max(requested, MIN_PASSWORD_LENGTH), MAX_PASSWORD_LENGTH)


def generate_password(length: int = DEFAULT_PASSWORD_LENGTH) -> PasswordResponse:
    """
    Build a password by sampling each position independently from PASSWORD_ALPHABET.

    Uses `secrets.choice` so the output is suitable for real credentials.
    """
    password = "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
    return PasswordResponse(password=password, length=len(password))


# ══════════════════════════════════════════════════════════════════════════
# Lorem Ipsum
# ══════════════════════════════════════════════════════════════════════════

LOREM_SMALL = "Lorem ipsum dolor sit amet, consectetur adipiscing elit."
LOREM_MEDIUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat."
)
LOREM_LARGE = LOREM_MEDIUM + (
    " Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu "
    "fugiat nulla pariatur. Excepteur sint occaecat cupidatat non proident, sunt in culpa "
    "qui officia deserunt mollit anim id est laborum."
)

LOREM_SIZES: Mapping[str, str] = MappingProxyType({
    "small": LOREM_SMALL,
    "medium": LOREM_MEDIUM,
    "large": LOREM_LARGE,
})

DEFAULT_LOREM_SIZE = "medium"


def lorem_text(size: Optional[str] = None) -> LoremResponse:
    """
    Return the fixed lorem text for `size`.

    The requested size is echoed back as given; an unknown size still gets
    the medium text.
    """
    requested = size or DEFAULT_LOREM_SIZE
    return LoremResponse(text=LOREM_SIZES.get(requested, LOREM_MEDIUM), size=requested)
