from typing import Optional

from . import base32 as base32
from .exceptions import DecodeError as DecodeError
from .exceptions import GenerationError as GenerationError
from .exceptions import InvalidCharacter as InvalidCharacter
from .exceptions import MalformedSecret as MalformedSecret
from .exceptions import TOTPError as TOTPError
from .mac import DEFAULT_ENGINE as DEFAULT_ENGINE
from .mac import HmacEngine as HmacEngine
from .mac import NativeHmacEngine as NativeHmacEngine
from .mac import PureHmacEngine as PureHmacEngine
from .mac import select_engine as select_engine
from .otp import OTP as OTP
from .sha1 import sha1 as sha1
from .totp import TOTP as TOTP
from .totp import TimeLike as TimeLike
from .utils import normalize_secret as normalize_secret
from .utils import validate_secret as validate_secret

_default = TOTP()


def generate(secret: str, at_time: Optional[TimeLike] = None) -> str:
    """
    Returns the 6 digit code for ``secret`` at ``at_time`` (default: now).

    :raises GenerationError: when the secret does not decode
    """
    return _default.generate(secret, at_time)


def get_remaining_seconds(at_time: Optional[TimeLike] = None) -> int:
    return _default.remaining_seconds(at_time)
