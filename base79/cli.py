"""
Command line for base79 keys.

    base79 mid                 R
    base79 floor R             >
    base79 ceiling R           f
    base79 between > R         H
    base79 digits 's?Q^Z'      72 20 38 51 47
    base79 random --count 10000 --seed 1

The random command starts with one key, then 'count' times inserts a new key at a random
position:  before the first, after the last, or between two neighbors.  It shows how slowly
the keys grow.
"""

import argparse
import logging
import random
import sys

from .codec import ParseError
from .digits import OrderError
from .key import Key
from .listing import KeyList


logger = logging.getLogger(__name__)

EXIT_USAGE = 2
PACKAGE_LOGGER = "base79"


def build_parser():
    p = argparse.ArgumentParser(prog="base79", description="Sortable base-79 fractional keys")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("mid", help="Print the seed key")

    between = sub.add_parser("between", help="Print a key between LOWER and UPPER")
    between.add_argument("lower")
    between.add_argument("upper")

    floor = sub.add_parser("floor", help="Print a key between zero and UPPER")
    floor.add_argument("upper")

    ceiling = sub.add_parser("ceiling", help="Print a key between LOWER and one")
    ceiling.add_argument("lower")

    digits = sub.add_parser("digits", help="Print the base-79 digits of KEY")
    digits.add_argument("key")

    rand = sub.add_parser("random", help="Random insertion demo")
    rand.add_argument("--count", type=int, default=10000, help="Number of inserts (default: 10000)")
    rand.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    rand.add_argument("--print-keys", action="store_true", help="Print every key, in order")
    return p


def random_listing(count, rng):
    """Grow a KeyList from the seed by 'count' inserts at random positions."""
    listing = KeyList()
    listing.append()
    for _ in range(count):
        listing.insert(rng.randint(0, len(listing)))
    return listing


def run(args, out):
    if args.cmd == "mid":
        print(Key.seed(), file=out)
    elif args.cmd == "between":
        print(Key.between(Key(args.lower), Key(args.upper)), file=out)
    elif args.cmd == "floor":
        print(Key.between_with_floor(Key(args.upper)), file=out)
    elif args.cmd == "ceiling":
        print(Key.between_with_ceiling(Key(args.lower)), file=out)
    elif args.cmd == "digits":
        print(" ".join(str(d) for d in Key(args.key).raw_digits()), file=out)
    elif args.cmd == "random":
        listing = random_listing(args.count, random.Random(args.seed))
        if args.print_keys:
            for key in listing:
                print(key, file=out)
        print("Max len: {}".format(listing.max_length()), file=out)
        print("Avg len: {:.4f}".format(listing.mean_length()), file=out)


def configure_logging(stream, level):
    """
    Send the package's log records to stream, at level.

    Replaces whatever an earlier call installed, so each main() gets its own stream and level.
    The root logger is left alone.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger


def main(argv=None, out=None, err=None):
    out = out or sys.stdout
    err = err or sys.stderr
    args = build_parser().parse_args(argv)
    configure_logging(err, logging.DEBUG if args.verbose else logging.WARNING)
    try:
        run(args, out)
    except (ParseError, OrderError) as e:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print("error: {}".format(e), file=err)
        return EXIT_USAGE
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
