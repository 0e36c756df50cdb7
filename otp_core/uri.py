"""
uri.py — otpauth:// provisioning URIs for authenticator apps.

- TOTP: otpauth://totp/{issuer}:{account}?secret=...&issuer=...&algorithm=...&digits=...&period=...
- HOTP: otpauth://hotp/{issuer}:{account}?secret=...&issuer=...&algorithm=...&digits=...&counter=...

algorithm, digits and issuer are always written out (plus period or
counter) so every app reads the same parameters. Components are
percent-encoded like JavaScript's encodeURIComponent: space -> %20, never '+'.
"""

from urllib.parse import quote

from . import base32
from .config import DEFAULT_CONFIG, OTPConfig
from .hotp import counter_to_bytes
from .secret import SecretLike

# characters encodeURIComponent leaves alone besides alphanumerics and "-_."
_SAFE = "!~*'()"


def _enc(value: str) -> str:
    return quote(value, safe=_SAFE)


def _secret_text(secret: SecretLike) -> str:
    if isinstance(secret, (bytes, bytearray)):
        return base32.encode(bytes(secret))
    return secret


def _build(kind: str, secret: SecretLike, account_name: str, issuer: str,
           config: OTPConfig, last_param: str) -> str:
    issuer_enc = _enc(issuer)
    return (
        f"otpauth://{kind}/{issuer_enc}:{_enc(account_name)}"
        f"?secret={_enc(_secret_text(secret))}&issuer={issuer_enc}"
        f"&algorithm={config.uri_algorithm}&digits={config.digits}&{last_param}"
    )


def build_totp_uri(secret: SecretLike, account_name: str, issuer: str,
                   config: OTPConfig = DEFAULT_CONFIG) -> str:
    """
    TOTP provisioning URI.

    Arguments:
        secret: Base32 secret (bytes are Base32-encoded first)
        account_name: label shown in the app, e.g. "alice@example.com"
        issuer: service name, e.g. "ExampleCo"
        config: algorithm / digits / period written into the URI

    Example:
        build_totp_uri("JBSWY3DPEHPK3PXP", "alice@example.com", "ExampleCo")
        -> "otpauth://totp/ExampleCo:alice%40example.com?secret=JBSWY3DPEHPK3PXP"
           "&issuer=ExampleCo&algorithm=SHA256&digits=6&period=30"
    """
    return _build("totp", secret, account_name, issuer, config, f"period={config.period}")


def build_hotp_uri(secret: SecretLike, account_name: str, issuer: str,
                   counter: int = 0, config: OTPConfig = DEFAULT_CONFIG) -> str:
    """HOTP provisioning URI; `counter` is the initial counter the app starts from."""
    counter_to_bytes(counter)  # range check
    return _build("hotp", secret, account_name, issuer, config, f"counter={counter}")
