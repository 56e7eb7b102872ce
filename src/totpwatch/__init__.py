from .exceptions import ConfigError as ConfigError
from .exceptions import InvalidSecretFormat as InvalidSecretFormat
from .exceptions import MissingSecret as MissingSecret
from .exceptions import TOTPError as TOTPError
from .otp import OTP as OTP
from .scheduler import Report as Report
from .scheduler import StepScheduler as StepScheduler
from .scheduler import watch as watch
from .totp import TOTP as TOTP
from .totp import generate_code as generate_code

__version__ = "1.0.0"
