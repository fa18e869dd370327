import logging
import time
from typing import Callable, NamedTuple, Optional

from .totp import TOTP
from .utils import ensure_valid_secret

log = logging.getLogger(__name__)

POLL_INTERVAL = 1.0
WARNING_SECONDS = 10
CRITICAL_SECONDS = 5


class Tick(NamedTuple):
    code: str
    remaining: int
    progress: float
    urgency: str


def urgency(remaining: int) -> str:
    if remaining <= CRITICAL_SECONDS:
        return "critical"
    if remaining <= WARNING_SECONDS:
        return "warning"
    return "normal"


class Watcher(object):
    """
    Keeps a code on display and refreshes it when the time window rolls over.

    This is the only stateful piece: it remembers the secret and the last
    counter it generated for. Stopping it at any time is safe because the
    generator itself keeps nothing between calls.
    """

    def __init__(
        self,
        secret: str,
        totp: Optional[TOTP] = None,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.secret = ensure_valid_secret(secret)
        self.totp = totp if totp is not None else TOTP()
        self.clock = clock
        self.sleep = sleep
        self._counter: Optional[int] = None
        self._code: Optional[str] = None

    def tick(self) -> Tick:
        now = int(self.clock())
        counter = self.totp.timecode(now)
        if counter != self._counter:
            self._code = self.totp.generate(self.secret, now)
            self._counter = counter
            log.debug("Code refreshed for counter %d", counter)
        remaining = self.totp.remaining_seconds(now)
        return Tick(
            code=self._code,  # type: ignore
            remaining=remaining,
            progress=remaining / self.totp.interval,
            urgency=urgency(remaining),
        )

    def run(self, limit: Optional[int] = None, out: Callable[[Tick], None] = print) -> int:
        """
        Polls once per second until ``limit`` ticks were emitted or the user
        interrupts.

        :returns: number of ticks emitted
        """
        count = 0
        try:
            while limit is None or count < limit:
                out(self.tick())
                count += 1
                if limit is None or count < limit:
                    self.sleep(POLL_INTERVAL)
        except KeyboardInterrupt:
            log.info("Watcher stopped")
        return count
