"""
config.py — Defaults and the OTPConfig value type.

OTPConfig is built once by the caller and passed explicitly to every
generator/verifier/URI call, so the algorithm, digits and period never
drift between call sites.
"""

import hashlib
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidConfigError

# --- Config / constants ----------------------------------------------------
DEFAULT_ALGORITHM = "sha256"
DEFAULT_DIGITS = 6          # 6 or 8
DEFAULT_TIME_STEP = 30      # TOTP period (seconds)
DEFAULT_T0 = 0              # Unix time counting starts at (RFC 6238)
DEFAULT_WINDOW = 1          # +/- periods accepted by verify_totp
SECRET_BYTES = 20           # 160-bit secret (common practice)

SUPPORTED_DIGITS = (6, 8)

HASH_FUNCTIONS = {
    "sha1": hashlib.sha1,
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
}


def normalize_algorithm(name: str) -> str:
    """
    Normalize a hash name to the keys of HASH_FUNCTIONS.

    "SHA-256", "sha_256", "SHA256" and "sha256" all become "sha256".

    Raises:
        InvalidConfigError: unknown or non-string algorithm
    """
    if not isinstance(name, str):
        raise InvalidConfigError(f"Algorithm must be a string, got {type(name).__name__}")
    key = name.strip().lower().replace("-", "").replace("_", "")
    if key not in HASH_FUNCTIONS:
        raise InvalidConfigError(
            f"Unsupported algorithm {name!r}; expected one of {', '.join(HASH_FUNCTIONS)}"
        )
    return key


@dataclass(frozen=True)
class OTPConfig:
    """
    Immutable HOTP/TOTP parameters.

    Attributes:
        algorithm: HMAC hash, one of sha1 / sha256 / sha512 (any case, dashes ok)
        digits: length of generated codes, 6 or 8
        period: TOTP time step in seconds, > 0
        t0: Unix time the TOTP counter starts at
    """

    algorithm: str = DEFAULT_ALGORITHM
    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_TIME_STEP
    t0: int = DEFAULT_T0

    def __post_init__(self):
        # frozen dataclass: write the normalized name through object.__setattr__
        object.__setattr__(self, "algorithm", normalize_algorithm(self.algorithm))

        if (isinstance(self.digits, bool) or not isinstance(self.digits, int)
                or self.digits not in SUPPORTED_DIGITS):
            raise InvalidConfigError(f"digits must be one of {SUPPORTED_DIGITS}, got {self.digits!r}")
        if isinstance(self.period, bool) or not isinstance(self.period, int) or self.period <= 0:
            raise InvalidConfigError(f"period must be a positive integer, got {self.period!r}")
        if isinstance(self.t0, bool) or not isinstance(self.t0, int):
            raise InvalidConfigError(f"t0 must be an integer, got {self.t0!r}")

    @property
    def hash_function(self):
        """hashlib constructor for this config's algorithm."""
        return HASH_FUNCTIONS[self.algorithm]

    @property
    def uri_algorithm(self) -> str:
        """Algorithm name as otpauth URIs spell it: SHA1, SHA256, SHA512."""
        return self.algorithm.upper()

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "OTPConfig":
        """
        Build a config from a plain dict, e.g. {"secret": ..., "digits": 8, "period": 60}.

        Missing keys fall back to the defaults, unknown keys (like "secret")
        are ignored.
        """
        return cls(
            algorithm=cfg.get("algorithm", DEFAULT_ALGORITHM),
            digits=cfg.get("digits", DEFAULT_DIGITS),
            period=cfg.get("period", DEFAULT_TIME_STEP),
            t0=cfg.get("t0", DEFAULT_T0),
        )


DEFAULT_CONFIG = OTPConfig()
