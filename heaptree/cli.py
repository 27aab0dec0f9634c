"""
Heap Tree Formatter Command-Line Interface (CLI)

Fills a min-heap with random integers and prints it twice:
- a one-line summary in array order
- an indented tree, one row per heap level

Usage examples:
    python -m heaptree
    python -m heaptree --nodes 31 --range 99
    python -m heaptree -n 12 -r 9 --seed 7 --annotate
"""

import argparse
import logging
import random
import sys

from rich.console import Console

from . import __version__
from .datastructures.heap import MinHeap
from .display.tree_renderer import TreeRenderer

# Defaults for a run without options
DEFAULT_NODE_COUNT = 20
DEFAULT_MAX_VALUE = 50
# Smallest value drawn for a node; the sampling range is [MIN_VALUE, max]
MIN_VALUE = 1

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Argument helpers
# -------------------------------------------------------------------
def positive_int(text):
    """argparse type: an integer strictly greater than zero."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, received {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, received {value}")
    return value


def make_console(mode, stream):
    """Build a rich Console on *stream* for the --color mode.

    ``auto`` leaves terminal detection to rich, so piped output stays plain.
    """
    if mode == "always":
        return Console(file=stream, force_terminal=True, color_system="standard", highlight=False)
    if mode == "never":
        return Console(file=stream, color_system=None, highlight=False)
    return Console(file=stream, highlight=False)


def configure_logging(verbose):
    """Send log records to stderr so stdout only carries the heap output."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# -------------------------------------------------------------------
# Core command
# -------------------------------------------------------------------
def run(args, out=None):
    """Build a random heap from parsed *args* and print summary plus tree."""
    out = out or sys.stdout
    rng = random.Random(args.seed)
    heap = MinHeap.filled_with_random(args.nodes, (MIN_VALUE, args.max_value), rng=rng)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("heap valid: %s", heap.is_valid())

    renderer = TreeRenderer(heap, max_value=args.max_value, annotate=args.annotate)
    renderer.print_to(make_console(args.color, out))


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def build_parser():
    """Build the argparse command-line parser."""
    p = argparse.ArgumentParser(
        prog="heaptree",
        description="Prints a random binary min-heap as a formatted tree.",
    )
    p.add_argument(
        "-n", "--nodes", type=positive_int, default=DEFAULT_NODE_COUNT,
        help=f"number of nodes in the tree (default: {DEFAULT_NODE_COUNT})",
    )
    p.add_argument(
        "-r", "--range", "--max", dest="max_value", type=positive_int, default=DEFAULT_MAX_VALUE,
        help=f"highest possible node value; nodes range over [{MIN_VALUE}..MAX] (default: {DEFAULT_MAX_VALUE})",
        metavar="MAX",
    )
    p.add_argument("--seed", type=int, default=None, help="seed for reproducible heaps")
    p.add_argument("--annotate", action="store_true", help="prefix each row with its row size")
    p.add_argument(
        "--color", choices=("auto", "always", "never"), default="auto",
        help="ANSI styling of the output (default: auto)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m heaptree`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    run(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
