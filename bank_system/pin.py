"""
PIN hashing.

PINs are stored as unsalted SHA-256 hex digests, so equal PINs produce equal
digests across accounts.
"""

import hashlib
import hmac


def hash_pin(pin: str) -> str:
    """Return the 64-character lowercase hex SHA-256 digest of ``pin``."""
    return hashlib.sha256(pin.encode('utf-8')).hexdigest()


def verify_pin(pin: str, digest: str) -> bool:
    """Check ``pin`` against a stored digest"""
    return hmac.compare_digest(hash_pin(pin), digest)


def is_valid_pin(pin: str, length: int = 4) -> bool:
    """A PIN is exactly ``length`` ASCII decimal digits."""
    return len(pin) == length and pin.isascii() and pin.isdigit()
