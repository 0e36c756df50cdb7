"""
errors.py — Exceptions raised by otp_core.

A candidate code with the wrong shape is NOT an error: the verifiers just
return False. Only caller mistakes (bad config, bad secret, counter out of
range) and broken invariants (TruncationError) are raised.
"""


class OTPError(Exception):
    """Base class for every otp_core exception."""


class InvalidSecretError(OTPError, ValueError):
    """Secret decodes to nothing, or contains characters a strict decoder rejects."""


class InvalidConfigError(OTPError, ValueError):
    """Algorithm, digits, period, window or another option is out of range."""


class InvalidCounterError(OTPError, ValueError):
    """Counter does not fit in an unsigned 64-bit integer."""


class TruncationError(OTPError, RuntimeError):
    """
    The HMAC digest is too short for dynamic truncation.

    Cannot happen with SHA-1/256/512 output sizes, so seeing it means the hash
    primitive is broken. Never mapped to a fallback code.
    """
