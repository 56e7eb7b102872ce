"""Stderr logger for totpwatch.

Stdout is reserved for the code lines; all logging goes to stderr.
"""

import logging
import sys

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

logger = logging.getLogger("totpwatch")
logger.addHandler(_handler)
logger.setLevel(logging.INFO)


def set_verbose(verbose: bool) -> None:
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
