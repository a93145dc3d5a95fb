import argparse
import logging
import sys

from prime_bloom import HASHERS, BloomFilter, InvalidConfiguration

# Primes keep a fingerprint from piling onto index 0 of every table.
DEFAULT_TABLE_SIZES = (11, 13, 17, 19, 23, 29, 31, 37)
DEFAULT_KEYS = (
    "Patrick",
    "Cody",
    "Vandy",
    "Alex",
    "Jess",
    "CaptainJackSparrow",
    "HollowKnight",
    "Coding",
    "Coder",
    "Code",
)
DEFAULT_ABSENT_KEY = "Loner"


def table_sizes(value: str) -> tuple[int, ...]:
    try:
        return tuple(int(size.strip()) for size in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected comma separated integers, got {value!r}"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prime_bloom",
        description="Populate a Bloom filter and report on membership",
    )
    parser.add_argument(
        "keys",
        nargs="*",
        default=list(DEFAULT_KEYS),
        help="Keys to add to the filter",
    )
    parser.add_argument(
        "--table-sizes",
        type=table_sizes,
        default=DEFAULT_TABLE_SIZES,
        help="Comma separated table sizes (e.g., 11,13,17)",
    )
    parser.add_argument(
        "--absent",
        action="append",
        help="Key that is never added; may be repeated",
    )
    parser.add_argument(
        "--hasher",
        default="polynomial",
        choices=sorted(HASHERS),
        help="Fingerprint function",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        bloom = BloomFilter(args.table_sizes, HASHERS[args.hasher])
    except InvalidConfiguration as e:
        parser.error(str(e))

    bloom.update(args.keys)

    status = 0
    for key in args.keys:
        if key in bloom:
            print(f"The Bloom filter probably contains {key}")
        else:
            print("ERROR: An added string returned false! That can't happen!")
            status = 1
    for key in args.absent or [DEFAULT_ABSENT_KEY]:
        if key not in bloom:
            print(
                f"The string, {key}, definitely does not exist in the Bloom"
                " filter."
            )
        else:
            print(f"Bloom filter returned a false positive for {key}!")
    return status


if __name__ == "__main__":
    sys.exit(main())
