import re

from .exceptions import MalformedSecret

MIN_SECRET_LENGTH = 16

_SEPARATORS = re.compile(r"[\s\-]")
_VALID_SECRET = re.compile(r"[A-Z2-7=]+")


def normalize_secret(raw: str) -> str:
    """
    Cleans up a secret as typed by a human.

    Whitespace and dashes are removed and the result is uppercased. Then the
    digits 0 and 1, which are not part of the Base32 alphabet, are replaced
    by the letters O and I they are usually mistaken for. The replacement is
    applied unconditionally; normalizing twice gives the same result.

    "jbsw y3dp-ehpk 3pxp" -> "JBSWY3DPEHPK3PXP"
    """
    cleaned = _SEPARATORS.sub("", raw).upper()
    return cleaned.replace("0", "O").replace("1", "I")


def validate_secret(raw: str) -> bool:
    """
    True when the normalized secret only uses the Base32 alphabet (plus
    padding) and is at least 16 characters long. Never raises.
    """
    try:
        cleaned = normalize_secret(raw)
    except (TypeError, AttributeError):
        return False
    return bool(_VALID_SECRET.fullmatch(cleaned)) and len(cleaned) >= MIN_SECRET_LENGTH


def ensure_valid_secret(raw: str) -> str:
    """
    Returns the normalized secret, or raises :class:`MalformedSecret`.
    """
    if not validate_secret(raw):
        length = len(raw) if isinstance(raw, str) else None
        raise MalformedSecret(
            "Invalid secret key format, expected at least {} base32 characters".format(MIN_SECRET_LENGTH),
            secret_length=length,
        )
    return normalize_secret(raw)
