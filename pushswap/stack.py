"""The stack of integers the sorting operations work on."""

from collections import deque
from dataclasses import dataclass, field

from .validation import atol


def _to_int32(value):
    return (value + 2**31) % 2**32 - 2**31


@dataclass
class Stack:
    """A stack whose first item is its top."""

    items: deque = field(default_factory=deque)

    @classmethod
    def from_args(cls, args):
        """Build a stack from command-line strings, first argument on top."""
        stack = cls()
        for arg in args:
            stack.push_back(_to_int32(atol(arg)))
        return stack

    def push_back(self, value):
        """Add ``value`` at the bottom of the stack."""
        self.items.append(value)

    def is_sorted(self):
        """Return True if values never decrease from top to bottom."""
        values = self.values()
        return all(x <= y for x, y in zip(values, values[1:]))

    def values(self):
        """Return the values from top to bottom as a list."""
        return list(self.items)

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)