"""
secret.py — Creating secrets and turning them into key bytes.

The arithmetic always runs on raw bytes; Base32 text is decoded once, here.
"""

import logging
import os
from typing import Callable, Union

from . import base32
from .config import SECRET_BYTES
from .errors import InvalidConfigError, InvalidSecretError

logger = logging.getLogger(__name__)

SecretLike = Union[bytes, bytearray, str]


def generate_secret(length: int = SECRET_BYTES,
                    randbytes: Callable[[int], bytes] = os.urandom) -> str:
    """
    Generate a random secret and return it as Base32 (no padding).

    Arguments:
        length: number of random bytes (default 20 -> 160-bit secret)
        randbytes: CSPRNG returning n bytes; os.urandom unless a caller injects one

    Returns:
        str: Base32 secret, e.g. "JBSWY3DPEHPK3PXP..." for authenticator apps
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidConfigError(f"Secret length must be a positive integer, got {length!r}")
    raw = randbytes(length)
    if len(raw) != length:
        raise InvalidConfigError(f"Random source returned {len(raw)} bytes, expected {length}")
    logger.debug("Generated %d-bit secret", length * 8)
    return base32.encode(raw)


def decode_secret(secret: SecretLike) -> bytes:
    """
    Return the raw key bytes for a secret.

    bytes/bytearray pass through unchanged; a str is Base32-decoded
    permissively (case-insensitive, padding and separators ignored).

    Raises:
        InvalidSecretError: the secret is empty or has no Base32 characters at all
    """
    if isinstance(secret, (bytes, bytearray)):
        key = bytes(secret)
    elif isinstance(secret, str):
        key = base32.decode(secret)
    else:
        raise InvalidSecretError(f"Secret must be bytes or a Base32 string, got {type(secret).__name__}")
    if not key:
        raise InvalidSecretError("Secret is empty or contains no valid Base32 characters")
    return key
