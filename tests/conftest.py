import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from otp_core import OTPConfig  # noqa: E402

# RFC 4226 Appendix D / RFC 6238 Appendix B seeds
RFC_SECRET_SHA1 = b"12345678901234567890"
RFC_SECRET_SHA256 = b"12345678901234567890123456789012"
RFC_SECRET_SHA512 = b"1234567890123456789012345678901234567890123456789012345678901234"
RFC_SECRET_SHA1_B32 = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"


@pytest.fixture
def rfc_secret():
    return RFC_SECRET_SHA1


@pytest.fixture
def sha1_config():
    return OTPConfig(algorithm="sha1", digits=6, period=30)


@pytest.fixture
def sha1_config_8():
    return OTPConfig(algorithm="sha1", digits=8, period=30)
