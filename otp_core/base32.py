"""
base32.py — RFC 4648 Base32 codec used for OTP secrets.

- encode(): no '=' padding on output (what authenticator apps expect)
- decode(): permissive, for user-pasted secrets only. Strips trailing '=',
  upper-cases, and silently skips anything outside the alphabet
  (spaces, dashes, stray punctuation).
- decode_strict(): same bit unpacking, but rejects anything that is not
  alphabet, whitespace or trailing padding. Use it for any data that is not
  an OTP secret.
"""

import base64

from .errors import InvalidSecretError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_LOOKUP = {ch: i for i, ch in enumerate(ALPHABET)}


def encode(data: bytes) -> str:
    """
    Base32-encode bytes without padding.

    Bytes are packed into 5-bit groups; leftover bits at the end are
    zero-extended on the low end before the last symbol is emitted.

    Example: encode(b"Hello!\\xde\\xad\\xbe\\xef") -> "JBSWY3DPEHPK3PXP"
    """
    return base64.b32encode(data).decode("ascii").rstrip("=")


def _unpack(symbols) -> bytes:
    # symbols: iterable of 5-bit values
    out = bytearray()
    value = 0
    bits = 0
    for sym in symbols:
        value = (value << 5) | sym
        bits += 5
        if bits >= 8:
            out.append((value >> (bits - 8)) & 0xFF)
            bits -= 8
        value &= (1 << bits) - 1
    return bytes(out)


def decode(text: str) -> bytes:
    """
    Permissive Base32 decode.

    Characters outside A-Z2-7 (after upper-casing) are skipped, so
    "jbsw y3dp-ehpk 3pxp" decodes the same as "JBSWY3DPEHPK3PXP". A string
    with no valid characters decodes to b"". Callers that need a secret
    should go through secret.decode_secret(), which rejects that.
    """
    cleaned = text.rstrip("=").upper()
    return _unpack(_LOOKUP[ch] for ch in cleaned if ch in _LOOKUP)


def decode_strict(text: str) -> bytes:
    """
    Strict Base32 decode.

    Whitespace and trailing '=' padding are ignored; any other character
    outside the alphabet raises InvalidSecretError.
    """
    cleaned = "".join(text.split()).rstrip("=").upper()
    symbols = []
    for pos, ch in enumerate(cleaned):
        try:
            symbols.append(_LOOKUP[ch])
        except KeyError as e:
            raise InvalidSecretError(f"Invalid Base32 character {ch!r} at position {pos}") from e
    return _unpack(symbols)
