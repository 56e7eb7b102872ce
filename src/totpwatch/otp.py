import base64
import hashlib
import hmac

from . import utils
from .exceptions import InvalidSecretFormat


class OTP(object):
    """
    Base class for OTP handlers.

    Codes are always HMAC-SHA1 with six digits, which is what every
    standard authenticator app expects.
    """

    digits = 6

    def __init__(self, s: str) -> None:
        """
        :param s: secret in base32 format, case and whitespace are ignored
        """
        self.secret = s
        self.digest = hashlib.sha1

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        if input < 0:
            raise ValueError("input must be positive integer")
        hasher = hmac.new(self.byte_secret(), self.int_to_bytestring(input), self.digest)
        hmac_hash = bytearray(hasher.digest())
        # Dynamic truncation: the low nibble of the last byte picks 4 bytes
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        # Leading zeros survive the slice
        str_code = str(10_000_000_000 + (code % 10**self.digits))
        return str_code[-self.digits :]

    def byte_secret(self) -> bytes:
        """
        Decodes the secret on every call; nothing is cached between codes.

        :raises InvalidSecretFormat: the normalized secret is empty or not Base32
        """
        secret = utils.normalize_secret(self.secret)
        if not secret:
            raise InvalidSecretFormat("secret is empty")
        try:
            return base64.b32decode(utils.pad_base32(secret))
        except ValueError as e:
            # binascii.Error, and non-ASCII input
            raise InvalidSecretFormat(e) from e

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        result = bytearray()
        while i != 0:
            result.append(i & 0xFF)
            i >>= 8
        if len(result) > padding:
            raise ValueError("counter does not fit in {} bytes".format(padding))
        # Big-endian, left-padded with zero bytes
        return bytes(bytearray(reversed(result)).rjust(padding, b"\0"))
