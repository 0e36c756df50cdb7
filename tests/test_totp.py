import hashlib
import importlib

import pyotp
import pytest

from otp_core import OTPConfig, hotp, remaining_seconds, time_counter, totp

from conftest import RFC_SECRET_SHA1, RFC_SECRET_SHA256, RFC_SECRET_SHA512

totp_module = importlib.import_module("otp_core.totp")

SECRETS = {"sha1": RFC_SECRET_SHA1, "sha256": RFC_SECRET_SHA256, "sha512": RFC_SECRET_SHA512}

# RFC 6238 Appendix B, 8 digits, 30 s period
RFC6238_VECTORS = [
    (59, "sha1", "94287082"),
    (59, "sha256", "46119246"),
    (59, "sha512", "90693936"),
    (1111111109, "sha1", "07081804"),
    (1111111109, "sha256", "68084774"),
    (1111111109, "sha512", "25091201"),
    (1111111111, "sha1", "14050471"),
    (1111111111, "sha256", "67062674"),
    (1111111111, "sha512", "99943326"),
    (1234567890, "sha1", "89005924"),
    (1234567890, "sha256", "91819424"),
    (1234567890, "sha512", "93441116"),
    (2000000000, "sha1", "69279037"),
    (2000000000, "sha256", "90698825"),
    (2000000000, "sha512", "38618901"),
    (20000000000, "sha1", "65353130"),
    (20000000000, "sha256", "77737706"),
    (20000000000, "sha512", "47863826"),
]


@pytest.mark.parametrize("timestamp,algorithm,expected", RFC6238_VECTORS)
def test_rfc6238_vectors(timestamp, algorithm, expected):
    config = OTPConfig(algorithm=algorithm, digits=8, period=30)
    assert totp(SECRETS[algorithm], timestamp=timestamp, config=config) == expected


def test_time_counter():
    config = OTPConfig(period=30)
    assert time_counter(0, config) == 0
    assert time_counter(29.999, config) == 0
    assert time_counter(30, config) == 1
    assert time_counter(59, config) == 1
    assert time_counter(1111111109, config) == 0x23523EC


def test_time_counter_with_t0():
    config = OTPConfig(period=30, t0=100)
    assert time_counter(100, config) == 0
    assert time_counter(159, config) == 1


def test_t0_shifts_codes():
    shifted = OTPConfig(algorithm="sha1", digits=8, t0=1000)
    plain = OTPConfig(algorithm="sha1", digits=8)
    assert totp(RFC_SECRET_SHA1, timestamp=1059, config=shifted) == totp(RFC_SECRET_SHA1, timestamp=59, config=plain)


def test_explicit_counter_wins_over_timestamp(sha1_config):
    assert totp(RFC_SECRET_SHA1, timestamp=10 ** 9, config=sha1_config, counter=1) == "287082"


def test_defaults_to_wall_clock(monkeypatch, sha1_config):
    monkeypatch.setattr(totp_module.time, "time", lambda: 45.5)
    assert totp(RFC_SECRET_SHA1, config=sha1_config) == hotp(RFC_SECRET_SHA1, 1, sha1_config)
    assert time_counter(config=sha1_config) == 1


def test_custom_period():
    config = OTPConfig(algorithm="sha1", period=60)
    assert totp(RFC_SECRET_SHA1, timestamp=119, config=config) == hotp(RFC_SECRET_SHA1, 1, config)


def test_matches_pyotp_reference():
    secret = pyotp.random_base32()
    for algorithm, digest in (("sha1", hashlib.sha1), ("sha256", hashlib.sha256), ("sha512", hashlib.sha512)):
        config = OTPConfig(algorithm=algorithm, digits=6, period=30)
        reference = pyotp.TOTP(secret, digits=6, digest=digest, interval=30)
        for ts in (0, 59, 1700000000, 1700000029, 1700000030):
            assert totp(secret, timestamp=ts, config=config) == reference.at(ts)


def test_remaining_seconds():
    config = OTPConfig(period=30)
    assert remaining_seconds(0, config) == 30
    assert remaining_seconds(59, config) == 1
    assert remaining_seconds(60, config) == 30
    assert remaining_seconds(75.9, config) == 15
