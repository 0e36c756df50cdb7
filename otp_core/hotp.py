"""
hotp.py — HOTP generator (RFC 4226).

Steps:
1. Message = 8-byte big-endian counter
2. digest = HMAC-<algorithm>(key=secret bytes, message)
3. Dynamic truncation -> 31-bit integer
4. code = value % 10^digits, zero-padded to "digits" characters

Pure function: same (secret, counter, config) always gives the same code.
"""

import hmac
import logging
import struct

from .config import DEFAULT_CONFIG, OTPConfig
from .errors import InvalidCounterError, TruncationError
from .secret import SecretLike, decode_secret

logger = logging.getLogger(__name__)

MAX_COUNTER = 2 ** 64 - 1


# --- RFC helpers -----------------------------------------------------------
def counter_to_bytes(counter: int) -> bytes:
    """
    Serialize a counter to 8 bytes, big-endian, unsigned.

    Example: counter_to_bytes(1) -> b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'

    Raises:
        InvalidCounterError: counter is not an int in [0, 2^64 - 1]
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidCounterError(f"Counter must be an integer, got {type(counter).__name__}")
    if not 0 <= counter <= MAX_COUNTER:
        raise InvalidCounterError(f"Counter {counter} does not fit in an unsigned 64-bit integer")
    return struct.pack(">Q", counter)


def dynamic_truncate(digest: bytes) -> int:
    """
    Dynamic truncation from RFC 4226 section 5.3.

    - offset = low nibble of the last byte
    - read 4 bytes at offset as a big-endian unsigned int
    - clear the top bit, giving a non-negative 31-bit value

    Raises:
        TruncationError: digest is empty or shorter than offset + 4
    """
    if not digest:
        raise TruncationError("Empty HMAC digest")
    offset = digest[-1] & 0x0F
    if len(digest) < offset + 4:
        raise TruncationError(
            f"HMAC digest of {len(digest)} bytes is too short for offset {offset}"
        )
    (value,) = struct.unpack(">I", digest[offset:offset + 4])
    return value & 0x7FFFFFFF


def format_code(value: int, digits: int) -> str:
    """Reduce a truncated value modulo 10^digits and left-pad it with zeros."""
    return str(value % (10 ** digits)).zfill(digits)


def hotp(secret: SecretLike, counter: int, config: OTPConfig = DEFAULT_CONFIG) -> str:
    """
    Generate an HOTP code.

    Arguments:
        secret: raw key bytes, or a Base32 string
        counter: integer counter in [0, 2^64 - 1]
        config: algorithm / digits (period is not used here)

    Returns:
        str: code of exactly config.digits characters

    Raises:
        InvalidSecretError: secret decodes to nothing
        InvalidCounterError: counter out of range
        TruncationError: digest too short (broken hash primitive)
    """
    key = decode_secret(secret)
    msg = counter_to_bytes(counter)
    digest = hmac.new(key, msg, config.hash_function).digest()
    logger.debug("HOTP: HMAC-%s(counter=%d), %d-byte digest",
                 config.uri_algorithm, counter, len(digest))
    return format_code(dynamic_truncate(digest), config.digits)
