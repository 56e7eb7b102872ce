"""
Locate the shared secret.

Sources, first non-blank wins: an explicit value, the process
environment, then a ``.env`` file.
"""

import os
from typing import Optional

from dotenv import dotenv_values, find_dotenv

from .exceptions import ConfigError, MissingSecret
from .log import logger

DEFAULT_VAR = "TOTP_SECRET"


def read_env_file(env_file: Optional[str] = None) -> dict:
    """
    Parse a .env file without touching ``os.environ``.

    Without ``env_file`` the nearest .env from the working directory
    upwards is used, and having none is not an error.
    """
    if env_file is None:
        env_file = find_dotenv(usecwd=True)
        if not env_file:
            return {}
    elif not os.path.isfile(env_file):
        raise ConfigError("env file not found: {}".format(env_file))

    logger.debug("reading %s", env_file)
    return dotenv_values(env_file)


def load_secret(
    secret: Optional[str] = None,
    env_file: Optional[str] = None,
    var: str = DEFAULT_VAR,
) -> str:
    """
    :param secret: value given directly, e.g. on the command line
    :param env_file: path of a .env file to read instead of searching
    :param var: name of the variable holding the secret
    :returns: the secret, not yet validated
    :raises MissingSecret: no source has a non-blank value
    """
    if secret and secret.strip():
        logger.debug("secret taken from the command line")
        return secret

    file_values = read_env_file(env_file)

    value = os.environ.get(var)
    if value and value.strip():
        logger.debug("secret taken from environment variable %s", var)
        return value

    value = file_values.get(var)
    if value and value.strip():
        logger.debug("secret taken from .env variable %s", var)
        return value

    raise MissingSecret(var)
