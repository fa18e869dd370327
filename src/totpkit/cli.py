import argparse
import logging
import sys
from typing import List, Optional

from .exceptions import GenerationError
from .totp import TOTP
from .utils import ensure_valid_secret, validate_secret
from .watch import Tick, Watcher

log = logging.getLogger(__name__)


def _print_tick(tick: Tick) -> None:
    print("{}  {:>2}s  [{}]".format(tick.code, tick.remaining, tick.urgency), flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totpkit",
        description="Generate 6-digit TOTP codes (RFC 6238) from a base32 secret.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    code = sub.add_parser("code", help="print the code for the current time window")
    code.add_argument("secret", help="Base32-encoded TOTP secret")
    code.add_argument("--at", type=int, default=None, help="unix timestamp to use instead of now")

    remaining = sub.add_parser("remaining", help="print seconds left in the current window")
    remaining.add_argument("--at", type=int, default=None, help="unix timestamp to use instead of now")

    validate = sub.add_parser("validate", help="check that a secret looks like base32")
    validate.add_argument("secret", help="Base32-encoded TOTP secret")

    watch = sub.add_parser("watch", help="keep printing the code with a countdown")
    watch.add_argument("secret", help="Base32-encoded TOTP secret")
    watch.add_argument("--count", type=int, default=None, help="stop after this many ticks")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    totp = TOTP()
    try:
        if args.command == "code":
            print(totp.generate(ensure_valid_secret(args.secret), args.at))
        elif args.command == "remaining":
            print(totp.remaining_seconds(args.at))
        elif args.command == "validate":
            valid = validate_secret(args.secret)
            print("valid" if valid else "invalid")
            return 0 if valid else 1
        elif args.command == "watch":
            Watcher(args.secret, totp=totp).run(limit=args.count, out=_print_tick)
    except (ValueError, GenerationError) as e:
        log.debug("Command %s failed", args.command, exc_info=True)
        print("error: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
