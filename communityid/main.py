"""
communityid/main.py

community-id — print the Community ID of a flow tuple.

    $ community-id tcp 128.232.110.120 66.35.250.204 34855 80
    1:LQU9qZlK+B5F3KDmev6m5PMibrg=

Exit status: 0 on success, 1 on missing or invalid input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Sequence

from .config import settings
from .engine import CommunityIDEngine

logger = logging.getLogger("communityid.main")

_EPILOG = """\
Use the following order to specify the tuple values:

  [protocol] [source IP] [dest IP] [source port] [dest port]

For example:

  $ community-id tcp 128.232.110.120 66.35.250.204 34855 80
  1:LQU9qZlK+B5F3KDmev6m5PMibrg=

Invalid inputs will lead to an error message on stderr.
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="community-id",
        description=(
            "Community ID calculator. Prints the Community ID value for a "
            "given flow tuple to stdout."
        ),
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", "-?", action="help", help="show this help message and exit")
    parser.add_argument("--seed", default=None, metavar="NUM",
                        help=f"hash seed in [0, 65535] (default: {settings.SEED})")
    parser.add_argument("--no-base64", action="store_false", dest="use_base64",
                        default=settings.USE_BASE64, help="render the digest as hex")
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG,
                        help="log every hashed segment to stderr")
    parser.add_argument(
        "--log-level", default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument("proto", nargs="?", help="protocol name or number")
    parser.add_argument("saddr", nargs="?", help="source IP address")
    parser.add_argument("daddr", nargs="?", help="destination IP address")
    parser.add_argument("sport", nargs="?", help="source port, or ICMP type")
    parser.add_argument("dport", nargs="?", help="destination port, or ICMP code")
    # Anything after the tuple is ignored
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def _print_error(msg: str) -> None:
    print(msg, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.debug else args.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    seed = settings.SEED
    if args.seed is not None:
        try:
            seed = int(args.seed)
        except ValueError:
            _print_error("The --seed argument needs an integer parameter.")
            return 1

    if not args.proto or not args.saddr or not args.daddr:
        parser.print_help(sys.stderr)
        return 1

    engine = CommunityIDEngine(
        seed=seed,
        use_base64=args.use_base64,
        error_sink=_print_error,
        debug=args.debug,
    )
    if args.extra:
        logger.debug("Ignoring %d argument(s) after the tuple: %r", len(args.extra), args.extra)
    logger.debug(
        "Tuple proto=%s %s:%s → %s:%s seed=%d",
        args.proto, args.saddr, args.sport, args.daddr, args.dport, seed,
    )
    cid = engine.calc(args.proto, args.saddr, args.daddr, args.sport, args.dport)
    if cid is None:
        return 1

    print(cid)
    return 0


if __name__ == "__main__":
    sys.exit(main())
