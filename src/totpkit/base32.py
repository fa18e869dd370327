from .exceptions import InvalidCharacter

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
_INDEX = {char: i for i, char in enumerate(ALPHABET)}


def decode(text: str) -> bytes:
    """
    Decodes a Base32 string into raw bytes.

    Padding characters are skipped wherever they appear and lowercase input
    is accepted. Each character contributes 5 bits; bits are emitted 8 at a
    time from the front and a trailing group of fewer than 8 bits is dropped,
    so the output is always ``non-padding characters * 5 // 8`` bytes long.

    :param text: Base32 text, e.g. "JBSWY3DPEHPK3PXP"
    :returns: decoded key bytes
    :raises InvalidCharacter: on a character outside A-Z2-7, with its index in ``text``
    """
    result = bytearray()
    buffer = 0
    bits = 0
    for position, char in enumerate(text):
        if char == "=":
            continue
        index = _INDEX.get(char.upper())
        if index is None:
            raise InvalidCharacter(char, position)
        buffer = (buffer << 5) | index
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            # drop the bits already emitted
            buffer &= (1 << bits) - 1

    return bytes(result)
