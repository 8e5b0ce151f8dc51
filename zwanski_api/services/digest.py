"""
Zwanski API: Text Digest
=========================

What:  SHA-256 of arbitrary text for /api/hash.
How:   hashlib over the UTF-8 encoding; deterministic for a given input.
"""

import hashlib
from typing import Optional

from zwanski_api.schemas.responses import HashResponse

DEFAULT_HASH_INPUT = "zwanski"
ALGORITHM_NAME = "SHA-256"


def sha256_hex(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def hash_text(text: Optional[str] = None) -> HashResponse:
    """Hash `text`, or the default input when it is absent or empty."""
    value = text or DEFAULT_HASH_INPUT
    return HashResponse(input=value, hash=sha256_hex(value), algorithm=ALGORITHM_NAME)
