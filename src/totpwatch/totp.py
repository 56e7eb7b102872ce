import datetime
import math
from typing import Union

from .otp import OTP

TimeLike = Union[int, float, datetime.datetime]


def unix_seconds(for_time: TimeLike) -> int:
    """
    Whole Unix seconds for an ``int``, ``float`` or ``datetime``.

    Naive datetimes are taken as local time, aware ones are converted
    through their offset. Fractions of a second are floored.
    """
    if isinstance(for_time, datetime.datetime):
        for_time = for_time.timestamp()
    return math.floor(for_time)


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    interval = 30

    def timecode(self, for_time: TimeLike) -> int:
        """
        Number of whole intervals since the Unix epoch.

        :param for_time: the time to derive the counter from
        :returns: the time step
        """
        return unix_seconds(for_time) // self.interval

    def at(self, for_time: TimeLike) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time))

    def valid_for(self, for_time: TimeLike) -> int:
        """
        Seconds left until the step containing ``for_time`` ends, 1 to 30.
        """
        return (self.timecode(for_time) + 1) * self.interval - unix_seconds(for_time)


def generate_code(secret: str, now: TimeLike) -> str:
    """
    Six-digit TOTP code for ``secret`` at ``now``.

    :param secret: Base32 shared secret, case and whitespace insensitive
    :param now: Unix seconds or a datetime
    :raises InvalidSecretFormat: the secret does not decode as Base32
    """
    return TOTP(secret).at(now)
