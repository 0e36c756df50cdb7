"""
verify.py — Checking user-entered codes.

- verify_totp(): accepts the code for any period in [now - window, now + window]
- verify_hotp(): accepts the code for counter .. counter + look_ahead and
  reports the next counter to store

A malformed candidate (wrong length, letters, None) is a normal
"not authenticated" result: both return False, never raise. Comparison uses
hmac.compare_digest. Nothing is persisted: blocking reuse of a code is the
caller's job.
"""

import hmac
import logging
import re
from typing import Optional, Tuple

from .config import DEFAULT_CONFIG, DEFAULT_WINDOW, OTPConfig
from .errors import InvalidConfigError
from .hotp import MAX_COUNTER, counter_to_bytes, hotp
from .secret import SecretLike, decode_secret
from .totp import Timestamp, time_counter

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def normalize_code(code, digits: int) -> Optional[str]:
    """
    Strip all whitespace from a candidate and check it is exactly `digits`
    ASCII digits. Returns the cleaned code, or None when the shape is wrong.
    """
    if not isinstance(code, str):
        return None
    cleaned = _WHITESPACE.sub("", code)
    if len(cleaned) != digits or not re.fullmatch(r"[0-9]+", cleaned):
        return None
    return cleaned


def _check_non_negative(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidConfigError(f"{name} must be a non-negative integer, got {value!r}")


def verify_totp(
    secret: SecretLike,
    code: str,
    window: int = DEFAULT_WINDOW,
    config: OTPConfig = DEFAULT_CONFIG,
    timestamp: Optional[Timestamp] = None,
) -> bool:
    """
    Verify a TOTP code with +/- `window` periods of clock drift.

    Arguments:
        secret: raw key bytes or Base32 string
        code: what the user typed; spaces are ignored ("123 456" is fine)
        window: periods accepted on each side; 0 = current period only
        config: algorithm, digits, period, t0
        timestamp: epoch seconds; None -> current time

    Returns:
        bool: True on the first matching period

    Raises:
        InvalidConfigError: window is negative
        InvalidSecretError: secret decodes to nothing
    """
    _check_non_negative("window", window)
    key = decode_secret(secret)

    candidate = normalize_code(code, config.digits)
    if candidate is None:
        logger.debug("Rejected TOTP candidate: expected %d digits", config.digits)
        return False

    counter = time_counter(timestamp, config)
    for offset in range(-window, window + 1):
        test_counter = counter + offset
        # counters before the epoch (or past uint64) never match
        if test_counter < 0 or test_counter > MAX_COUNTER:
            continue
        expected = hotp(key, test_counter, config)
        if hmac.compare_digest(expected, candidate):
            logger.debug("TOTP matched at offset %+d", offset)
            return True
    return False


def verify_hotp(
    secret: SecretLike,
    code: str,
    counter: int,
    look_ahead: int = 1,
    config: OTPConfig = DEFAULT_CONFIG,
) -> Tuple[bool, int]:
    """
    Verify an HOTP code against counter .. counter + look_ahead.

    Arguments:
        secret: raw key bytes or Base32 string
        code: what the user typed
        counter: the counter the caller has stored for this secret
        look_ahead: how many counters past `counter` are accepted
        config: algorithm and digits

    Returns:
        (True, matched_counter + 1) on success: store that as the new counter
        (False, counter) otherwise

    Raises:
        InvalidCounterError: stored counter is not in [0, 2^64 - 1]
    """
    _check_non_negative("look_ahead", look_ahead)
    counter_to_bytes(counter)  # range check, whatever the candidate looks like
    key = decode_secret(secret)

    candidate = normalize_code(code, config.digits)
    if candidate is None:
        logger.debug("Rejected HOTP candidate: expected %d digits", config.digits)
        return False, counter

    for i in range(look_ahead + 1):
        test_counter = counter + i
        if test_counter > MAX_COUNTER:
            break
        expected = hotp(key, test_counter, config)
        if hmac.compare_digest(expected, candidate):
            logger.debug("HOTP matched at counter %d", test_counter)
            return True, test_counter + 1
    return False, counter
