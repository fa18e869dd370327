import pytest

from totpkit import TOTP, NativeHmacEngine, PureHmacEngine

# RFC 6238 appendix B, SHA-1 seed "12345678901234567890"
RFC_SECRET = "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"
RFC_KEY = b"12345678901234567890"
SECRET = "JBSWY3DPEHPK3PXP"


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def totp():
    return TOTP()


@pytest.fixture(params=[NativeHmacEngine, PureHmacEngine], ids=["native", "pure"])
def engine(request):
    return request.param()
