from typing import Optional

from .mac import DEFAULT_ENGINE, HmacEngine

DEFAULT_DIGITS = 6


def dynamic_truncate(digest: bytes, digits: int = DEFAULT_DIGITS) -> int:
    """
    RFC 4226 section 5.3 dynamic truncation.

    The low nibble of the last byte picks an offset, four bytes from there
    form a 31 bit integer (top bit masked off) which is reduced modulo
    ``10 ** digits``.

    :param digest: HMAC output, at least 20 bytes
    :param digits: number of decimal digits to keep
    :returns: integer in ``[0, 10 ** digits - 1]``
    """
    hmac_hash = bytearray(digest)
    offset = hmac_hash[-1] & 0xF
    code = (
        (hmac_hash[offset] & 0x7F) << 24
        | (hmac_hash[offset + 1] & 0xFF) << 16
        | (hmac_hash[offset + 2] & 0xFF) << 8
        | (hmac_hash[offset + 3] & 0xFF)
    )
    return code % 10**digits


def format_code(code: int, digits: int = DEFAULT_DIGITS) -> str:
    # 10 ** 10 offset keeps the leading zeros, then slice the tail
    str_code = str(10_000_000_000 + (code % 10**digits))
    return str_code[-digits:]


def int_to_bytestring(i: int, padding: int = 8) -> bytes:
    """
    Turns an integer to the OATH specified
    bytestring, which is fed to the HMAC
    along with the secret
    """
    result = bytearray()
    while i != 0:
        result.append(i & 0xFF)
        i >>= 8
    return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))


class OTP(object):
    """
    Base class for OTP handlers. Holds configuration only, never a secret.
    """

    def __init__(self, digits: int = DEFAULT_DIGITS, engine: Optional[HmacEngine] = None) -> None:
        self.digits = digits
        if digits > 10:
            raise ValueError("digits must be no greater than 10")
        if digits < 1:
            raise ValueError("digits must be a positive integer")
        self.engine = engine if engine is not None else DEFAULT_ENGINE

    def generate_otp(self, key: bytes, input: int) -> str:
        """
        :param key: decoded secret bytes
        :param input: the HMAC counter value to use as the OTP input.
            Usually the computed integer based on the Unix timestamp
        """
        if input < 0:
            raise ValueError("input must be positive integer")
        hmac_hash = self.engine.digest(key, int_to_bytestring(input))
        return format_code(dynamic_truncate(hmac_hash, self.digits), self.digits)
