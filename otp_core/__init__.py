"""
otp_core package
================

HOTP/TOTP one-time passwords (RFC 4226 & RFC 6238) and the Base32 codec
they need. Pure functions only: no files, no network, no stored state.

──────────────────────────────────────────────
Core algorithm
──────────────────────────────────────────────
- HOTP (HMAC-based One-Time Password):
  code = Truncate(HMAC-<alg>(key=secret, msg=counter)) mod 10^digits

- TOTP (Time-based One-Time Password):
  HOTP with counter = floor((timestamp - T0) / period)
  → defaults: SHA-256, 6 digits, 30 s period, T0 = 0.

- Dynamic truncation:
  4 bytes of the digest at offset (last byte & 0x0F), top bit cleared.

──────────────────────────────────────────────
Quick usage
──────────────────────────────────────────────
>>> from otp_core import OTPConfig, generate_secret, totp, verify_totp, build_totp_uri
>>> cfg = OTPConfig(algorithm="sha1", digits=6, period=30)
>>> secret = generate_secret()
>>> uri = build_totp_uri(secret, "alice@example.com", "ExampleCo", cfg)
>>> code = totp(secret, config=cfg)
>>> verify_totp(secret, code, window=1, config=cfg)
True

Backend code stores the secret (and the OTPConfig fields) itself; block
reuse of accepted codes and rate limit attempts at that layer.
"""

import logging

from .base32 import decode as base32_decode
from .base32 import decode_strict as base32_decode_strict
from .base32 import encode as base32_encode
from .config import (
    DEFAULT_ALGORITHM,
    DEFAULT_CONFIG,
    DEFAULT_DIGITS,
    DEFAULT_TIME_STEP,
    DEFAULT_WINDOW,
    OTPConfig,
)
from .errors import (
    InvalidConfigError,
    InvalidCounterError,
    InvalidSecretError,
    OTPError,
    TruncationError,
)
from .hotp import counter_to_bytes, dynamic_truncate, format_code, hotp
from .qr import qr_code_data_url, qr_code_png
from .secret import decode_secret, generate_secret
from .totp import remaining_seconds, time_counter, totp
from .uri import build_hotp_uri, build_totp_uri
from .verify import verify_hotp, verify_totp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_CONFIG",
    "DEFAULT_DIGITS",
    "DEFAULT_TIME_STEP",
    "DEFAULT_WINDOW",
    "InvalidConfigError",
    "InvalidCounterError",
    "InvalidSecretError",
    "OTPConfig",
    "OTPError",
    "TruncationError",
    "base32_decode",
    "base32_decode_strict",
    "base32_encode",
    "build_hotp_uri",
    "build_totp_uri",
    "counter_to_bytes",
    "decode_secret",
    "dynamic_truncate",
    "format_code",
    "generate_secret",
    "hotp",
    "qr_code_data_url",
    "qr_code_png",
    "remaining_seconds",
    "time_counter",
    "totp",
    "verify_hotp",
    "verify_totp",
]
