"""
totp.py — TOTP wrapper (RFC 6238): HOTP with counter = floor((now - T0) / period).

Every function takes an optional timestamp (epoch seconds) so tests and
callers that need determinism never depend on the wall clock.
"""

import logging
import time
from typing import Optional, Union

from .config import DEFAULT_CONFIG, OTPConfig
from .hotp import hotp
from .secret import SecretLike

logger = logging.getLogger(__name__)

Timestamp = Union[int, float]


def time_counter(timestamp: Optional[Timestamp] = None, config: OTPConfig = DEFAULT_CONFIG) -> int:
    """
    TOTP counter for a point in time.

    Arguments:
        timestamp: epoch seconds (int or float); None -> time.time()
        config: period and t0 are used

    Returns:
        int: floor((timestamp - t0) / period)
    """
    if timestamp is None:
        timestamp = time.time()
    return int((timestamp - config.t0) // config.period)


def remaining_seconds(timestamp: Optional[Timestamp] = None, config: OTPConfig = DEFAULT_CONFIG) -> int:
    """Whole seconds left before the code for `timestamp` rolls over (1..period)."""
    if timestamp is None:
        timestamp = time.time()
    return int(config.period - ((int(timestamp) - config.t0) % config.period))


def totp(
    secret: SecretLike,
    timestamp: Optional[Timestamp] = None,
    config: OTPConfig = DEFAULT_CONFIG,
    counter: Optional[int] = None,
) -> str:
    """
    Generate a TOTP code.

    Arguments:
        secret: raw key bytes or Base32 string
        timestamp: epoch seconds; None -> current time
        config: algorithm, digits, period, t0
        counter: explicit counter; when given, timestamp is ignored

    Returns:
        str: code of exactly config.digits characters
    """
    if counter is None:
        counter = time_counter(timestamp, config)
    logger.debug("TOTP: counter=%d, period=%ds", counter, config.period)
    return hotp(secret, counter, config)
