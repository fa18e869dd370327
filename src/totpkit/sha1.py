"""
Pure Python SHA-1 (RFC 3174).

Only used when the interpreter cannot provide SHA-1 itself, see
:func:`totpkit.mac.select_engine`. Output is identical to ``hashlib.sha1``.
"""

import struct
from typing import List, Tuple

DIGEST_SIZE = 20
BLOCK_SIZE = 64

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


def _pad(data: bytes) -> bytes:
    # 0x80, zeros up to 56 mod 64, then the 64-bit big-endian bit length
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    return data + b"\x80" + b"\x00" * ((55 - len(data)) % BLOCK_SIZE) + struct.pack(">Q", bit_length)


def _compress(state: Tuple[int, ...], block: bytes) -> Tuple[int, ...]:
    w: List[int] = list(struct.unpack(">16I", block))
    for i in range(16, 80):
        w.append(_rotl(w[i - 3] ^ w[i - 8] ^ w[i - 14] ^ w[i - 16], 1))

    a, b, c, d, e = state
    for i in range(80):
        if i < 20:
            f = (b & c) | ((b ^ _MASK) & d)
            k = 0x5A827999
        elif i < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6

        temp = (_rotl(a, 5) + f + e + k + w[i]) & _MASK
        e = d
        d = c
        c = _rotl(b, 30)
        b = a
        a = temp

    return tuple((x + y) & _MASK for x, y in zip(state, (a, b, c, d, e)))


def sha1(data: bytes) -> bytes:
    """
    Returns the 20 byte SHA-1 digest of ``data``.

    :param data: message of any length, including empty
    """
    padded = _pad(bytes(data))
    state: Tuple[int, ...] = _INITIAL_STATE
    for offset in range(0, len(padded), BLOCK_SIZE):
        state = _compress(state, padded[offset : offset + BLOCK_SIZE])
    return struct.pack(">5I", *state)


def hexdigest(data: bytes) -> str:
    return sha1(data).hex()
