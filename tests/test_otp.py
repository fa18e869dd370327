import pytest

from totpkit.otp import OTP, dynamic_truncate, format_code, int_to_bytestring

from .conftest import RFC_KEY


class TestDynamicTruncate:
    # RFC 4226 section 5.4 example
    DIGEST = bytes.fromhex("1f8698690e02ca16618550ef7f19da8e945b555a")

    def test_rfc4226_example(self):
        assert dynamic_truncate(self.DIGEST, 10) == 0x50EF7F19
        assert dynamic_truncate(self.DIGEST, 6) == 872921

    def test_top_bit_is_masked(self):
        digest = b"\xff\xff\xff\xff" + b"\x00" * 16
        assert dynamic_truncate(digest, 10) == 0x7FFFFFFF

    def test_offset_fifteen_reads_last_bytes(self):
        digest = b"\x00" * 15 + b"\x00\x00\x01\x02\x0f"
        # offset 15 covers bytes 15..18
        assert dynamic_truncate(digest, 10) == 0x00000102

    def test_range(self):
        assert 0 <= dynamic_truncate(bytes(range(20)), 6) <= 999999


class TestFormatting:
    def test_zero_padded(self):
        assert format_code(7, 6) == "000007"
        assert format_code(0, 6) == "000000"
        assert format_code(123456, 6) == "123456"

    def test_int_to_bytestring(self):
        assert int_to_bytestring(0) == b"\x00" * 8
        assert int_to_bytestring(1) == b"\x00" * 7 + b"\x01"
        assert int_to_bytestring(12345) == b"\x00" * 6 + b"\x30\x39"


class TestOTP:
    def test_rfc4226_hotp_values(self, engine):
        otp = OTP(engine=engine)
        expected = ["755224", "287082", "359152", "969429", "338314", "254676", "287922", "162583", "399871", "520489"]
        assert [otp.generate_otp(RFC_KEY, i) for i in range(10)] == expected

    def test_rejects_negative_input(self):
        with pytest.raises(ValueError):
            OTP().generate_otp(RFC_KEY, -1)

    @pytest.mark.parametrize("digits", [0, 11])
    def test_rejects_bad_digits(self, digits):
        with pytest.raises(ValueError):
            OTP(digits=digits)
