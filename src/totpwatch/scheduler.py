"""Decide when a new code is due and report it once per time step."""

import datetime
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .log import logger
from .totp import TOTP, TimeLike, generate_code, unix_seconds

INTERVAL = TOTP.interval


@dataclass(frozen=True)
class Report:
    """
    One code, emitted when a new time step begins.

    Attributes:
        timestamp: local wall-clock time of the tick, for display.
        code: the six-digit code for ``step``.
        valid_for: whole seconds until ``step`` ends.
        step: the time step the code belongs to.
    """

    timestamp: datetime.datetime
    code: str
    valid_for: int
    step: int


class StepScheduler:
    """
    Produces at most one report per time step for a single secret.

    The scheduler never reads the clock or sleeps itself; callers feed
    it the current time through :meth:`tick`.
    """

    def __init__(
        self,
        secret: str,
        generator: Callable[[str, TimeLike], str] = generate_code,
    ) -> None:
        self.secret = secret
        self.generator = generator
        self.last_step = -1

    def tick(self, now: TimeLike) -> Optional[Report]:
        """
        :param now: current time as Unix seconds or a datetime
        :returns: a report if ``now`` falls in a step not yet reported, else None
        :raises InvalidSecretFormat: the secret cannot be decoded
        :raises ValueError: ``now`` is before the Unix epoch
        """
        seconds = unix_seconds(now)
        step = seconds // INTERVAL
        if step < 0:
            raise ValueError("time step must not be negative")
        if step <= self.last_step:
            return None

        code = self.generator(self.secret, seconds)
        logger.debug("step %d started, new code generated", step)
        self.last_step = step
        return Report(
            timestamp=datetime.datetime.fromtimestamp(seconds),
            code=code,
            valid_for=(step + 1) * INTERVAL - seconds,
            step=step,
        )


def watch(
    scheduler: StepScheduler,
    emit: Callable[[Report], None],
    clock: Optional[Callable[[], float]] = None,
    sleep: Optional[Callable[[float], None]] = None,
    poll_interval: float = 0.5,
    count: Optional[int] = None,
) -> int:
    """
    Poll ``clock`` and pass every new report to ``emit``.

    Runs until ``count`` reports were emitted, or forever when ``count``
    is None. Errors from the scheduler end the loop on the first tick
    they occur.

    :param clock: returns Unix seconds, defaults to time.time
    :param sleep: suspends for ``poll_interval``, defaults to time.sleep
    :param poll_interval: seconds between ticks, below one time step
    :returns: the number of reports emitted
    """
    clock = clock or time.time
    sleep = sleep or time.sleep
    if not 0 < poll_interval < INTERVAL:
        raise ValueError("poll_interval must be between 0 and {} seconds".format(INTERVAL))
    if count is not None and count < 1:
        raise ValueError("count must be at least 1")

    emitted = 0
    while True:
        report = scheduler.tick(clock())
        if report is not None:
            emit(report)
            emitted += 1
            if count is not None and emitted >= count:
                return emitted
        sleep(poll_interval)
