import hashlib
import hmac
import logging

from . import sha1 as _sha1

log = logging.getLogger(__name__)

BLOCK_SIZE = _sha1.BLOCK_SIZE
_INNER = 0x36
_OUTER = 0x5C


class HmacEngine(object):
    """
    Strategy computing HMAC-SHA1. Engines are stateless and safe to share.
    """

    name = "abstract"

    def digest(self, key: bytes, message: bytes) -> bytes:
        raise NotImplementedError

    def __repr__(self) -> str:
        return "<{} {}>".format(type(self).__name__, self.name)


class NativeHmacEngine(HmacEngine):
    """
    Uses the interpreter's ``hmac`` module (OpenSSL backed where available).
    """

    name = "native"

    def digest(self, key: bytes, message: bytes) -> bytes:
        return hmac.new(bytes(key), bytes(message), hashlib.sha1).digest()


class PureHmacEngine(HmacEngine):
    """
    RFC 2104 HMAC on top of the pure Python SHA-1 in :mod:`totpkit.sha1`.
    """

    name = "pure"

    def digest(self, key: bytes, message: bytes) -> bytes:
        return hmac_sha1(key, message)


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    :param key: HMAC key, hashed first when longer than the 64 byte block
    :param message: message to authenticate
    :returns: 20 byte MAC
    """
    key = bytes(key)
    if len(key) > BLOCK_SIZE:
        key = _sha1.sha1(key)
    key = key.ljust(BLOCK_SIZE, b"\0")

    inner_pad = bytes(k ^ _INNER for k in key)
    outer_pad = bytes(k ^ _OUTER for k in key)

    return _sha1.sha1(outer_pad + _sha1.sha1(inner_pad + bytes(message)))


def select_engine() -> HmacEngine:
    """
    Picks the native engine when the interpreter can compute HMAC-SHA1,
    otherwise the pure Python one.
    """
    try:
        hmac.new(b"", b"", hashlib.sha1).digest()
    except (ValueError, AttributeError) as e:
        # Restricted and FIPS-mode builds may refuse SHA-1
        log.warning("Native HMAC-SHA1 unavailable (%s), using pure Python fallback", e)
        return PureHmacEngine()
    return NativeHmacEngine()


DEFAULT_ENGINE = select_engine()
