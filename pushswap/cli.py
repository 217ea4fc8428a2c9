"""Command-line entry point: print the operations that sort the arguments."""

import sys

from .sorting import sort_stack
from .stack import Stack
from .validation import is_valid


def _error():
    sys.stderr.write("Error\n")
    return 1


def main(argv=None):
    """Run the sorter on ``argv`` and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    if not is_valid(args):
        return _error()
    a = Stack.from_args(args)
    b = Stack()
    if not a.is_sorted():
        sort_stack(a, b)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())