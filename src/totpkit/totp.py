import calendar
import datetime
import logging
import time
from typing import Optional, Union

from . import base32
from .exceptions import DecodeError, GenerationError
from .mac import HmacEngine
from .otp import DEFAULT_DIGITS, OTP
from .utils import normalize_secret

log = logging.getLogger(__name__)

DEFAULT_INTERVAL = 30

TimeLike = Union[int, float, datetime.datetime]


class TOTP(OTP):
    """
    Handler for time-based OTP codes.

    Instances only carry configuration, so one instance can serve any number
    of secrets and threads.
    """

    def __init__(
        self,
        digits: int = DEFAULT_DIGITS,
        interval: int = DEFAULT_INTERVAL,
        engine: Optional[HmacEngine] = None,
    ) -> None:
        """
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param engine: HMAC-SHA1 strategy, defaults to the one selected at import
        """
        if interval <= 0:
            raise ValueError("interval must be a positive integer")
        self.interval = interval
        super().__init__(digits=digits, engine=engine)

    def generate(self, secret: str, at_time: Optional[TimeLike] = None) -> str:
        """
        Generates the code for the given secret at the given time.

        :param secret: base32 secret as typed by the user, normalized here
        :param at_time: unix timestamp or datetime, defaults to now
        :returns: OTP value
        :raises GenerationError: when the secret does not decode
        """
        counter = self.timecode(at_time)
        log.debug("Generating TOTP for counter %d", counter)
        try:
            key = base32.decode(normalize_secret(secret))
        except DecodeError as e:
            log.debug("Secret could not be decoded: %s", e)
            raise GenerationError("Could not decode secret: {}".format(e)) from e
        return self.generate_otp(key, counter)

    def timecode(self, at_time: Optional[TimeLike] = None) -> int:
        """
        Accepts either a timezone naive (`at_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).
        """
        return int(_unix_time(at_time) // self.interval)

    def remaining_seconds(self, at_time: Optional[TimeLike] = None) -> int:
        """
        Seconds until the next code, between 1 and ``interval``. The code
        rotates exactly when this wraps from 1 back to ``interval``.
        """
        return self.interval - int(_unix_time(at_time)) % self.interval


def _unix_time(at_time: Optional[TimeLike]) -> int:
    if at_time is None:
        return int(time.time())
    if isinstance(at_time, datetime.datetime):
        if at_time.tzinfo:
            return calendar.timegm(at_time.utctimetuple())
        return int(time.mktime(at_time.timetuple()))
    return int(at_time)
