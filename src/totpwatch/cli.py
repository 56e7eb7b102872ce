"""totpwatch console script: print a new TOTP code at every 30 second step."""

import argparse
import sys
from typing import Optional, Sequence

from . import config
from .exceptions import TOTPError
from .log import logger, set_verbose
from .scheduler import INTERVAL, Report, StepScheduler, watch


def format_report(report: Report) -> str:
    return "[{}] TOTP: {} (valid for {} seconds)".format(
        report.timestamp.strftime("%H:%M:%S"), report.code, report.valid_for
    )


def print_report(report: Report) -> None:
    print(format_report(report), flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totpwatch", description="Print a new TOTP code every {} seconds.".format(INTERVAL)
    )
    parser.add_argument("--secret", help="Base32 secret. Prefer the environment or a .env file.")
    parser.add_argument("--env-file", dest="env_file", help="Read the secret from this .env file.")
    parser.add_argument(
        "--var", default=config.DEFAULT_VAR, help="Variable holding the secret (default: %(default)s)."
    )
    parser.add_argument(
        "--poll", type=float, default=0.5, help="Seconds between clock checks (default: %(default)s)."
    )
    limit = parser.add_mutually_exclusive_group()
    limit.add_argument("--count", type=int, help="Exit after printing this many codes.")
    limit.add_argument("--once", action="store_true", help="Print the current code and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not 0 < args.poll < INTERVAL:
        parser.error("--poll must be between 0 and {} seconds".format(INTERVAL))
    if args.count is not None and args.count < 1:
        parser.error("--count must be at least 1")
    set_verbose(args.verbose)

    count = 1 if args.once else args.count
    try:
        secret = config.load_secret(args.secret, env_file=args.env_file, var=args.var)
        if not args.once:
            print("Printing TOTP codes every {} seconds.".format(INTERVAL), flush=True)
        watch(StepScheduler(secret), print_report, poll_interval=args.poll, count=count)
    except (TOTPError, ValueError) as e:
        logger.error("%s", e)
        return 1
    except KeyboardInterrupt:
        print("\nLeaving program.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
