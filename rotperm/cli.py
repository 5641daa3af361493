import argparse
import logging
import time

from .group import CyclicGroup
from .tally import CycleTally

logger = logging.getLogger(__name__)


def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"size must be at least 1, got {value}")
    return value


def run(size, display = True, out = None):
    """
    Walk the cyclic group of the given size and tally the cycle length of label 1.

    Every element is printed in cycle notation first if display is True.
    Returns the resulting CycleTally.
    """
    group = CyclicGroup(size)
    tally = CycleTally()
    logger.info("Walking %s", group)

    for perm in group:
        if display:
            perm.display_cycle_notation(file=out)
        tally.add(perm.first_cycle_length())

    return tally


def main(argv = None):
    parser = argparse.ArgumentParser(
        description="Tally cycle lengths over the powers of a single rotation of N elements.")
    parser.add_argument("-n", "--size", type=_positive_int, default=8,
                        help="number of elements N, i.e. the group is C_N (default: 8)")
    parser.add_argument("--display", action=argparse.BooleanOptionalAction, default=True,
                        help="print every element in cycle notation (floods the console for large N)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    start = time.perf_counter()
    tally = run(args.size, display=args.display)

    for line in tally.lines():
        print(line)

    print(f"Finished in {time.perf_counter() - start:.6f}s")
    return 0
