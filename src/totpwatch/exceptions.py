class TOTPError(Exception):
    """
    Base class for every error raised by totpwatch.
    """


class InvalidSecretFormat(TOTPError, ValueError):
    """
    The shared secret is not valid Base32 once normalized.

    :param reason: the underlying decode failure, kept for the message
    """

    def __init__(self, reason: object) -> None:
        self.reason = reason
        super().__init__("invalid secret format: {}".format(reason))


class ConfigError(TOTPError):
    """
    The secret could not be located in the configured sources.
    """


class MissingSecret(ConfigError):
    def __init__(self, var: str) -> None:
        self.var = var
        super().__init__("{} not found in the environment or .env file".format(var))
