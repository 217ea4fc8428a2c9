"""Stack operations and the small-stack sorting strategy.

Every operation that changes a stack writes its name on its own line to
standard output.
"""

import sys


def _emit(name):
    sys.stdout.write(name + "\n")


def op_sa(a):
    """Swap the two top items of ``a``."""
    if a is None or len(a) < 2:
        return
    items = a.items
    items[0], items[1] = items[1], items[0]
    _emit("sa")


def op_ra(a):
    """Move the top item of ``a`` to the bottom."""
    if a is None or len(a) < 2:
        return
    a.items.rotate(-1)
    _emit("ra")


def op_rra(a):
    """Move the bottom item of ``a`` to the top."""
    if a is None or len(a) < 2:
        return
    a.items.rotate(1)
    _emit("rra")


def op_pa(a, b):
    """Move the top item of ``b`` onto ``a``."""
    if b is None or not len(b):
        return
    a.items.appendleft(b.items.popleft())
    _emit("pa")


def op_pb(a, b):
    """Move the top item of ``a`` onto ``b``."""
    if a is None or not len(a):
        return
    b.items.appendleft(a.items.popleft())
    _emit("pb")


def sort_three(a):
    """Sort the three top items of ``a`` with at most two operations."""
    fst, snd, trd = a.items[0], a.items[1], a.items[2]
    if snd < fst < trd:
        op_sa(a)
    elif fst > snd > trd:
        op_sa(a)
        op_rra(a)
    elif fst > trd and snd < trd:
        op_ra(a)
    elif fst < trd < snd:
        op_sa(a)
        op_ra(a)
    elif trd < fst < snd:
        op_rra(a)


def find_min_index(a):
    """Return the position, from the top, of the first smallest item."""
    if not len(a):
        raise ValueError("empty stack has no minimum")
    return min(enumerate(a), key=lambda pair: pair[1])[0]


def rotate_top(a, idx):
    """Bring the item at ``idx`` to the top by the shorter rotation."""
    size = len(a)
    if idx <= size // 2:
        for _ in range(idx):
            op_ra(a)
    else:
        for _ in range(size - idx):
            op_rra(a)


def sort_five(a, b):
    """Sort ``a`` by parking its smallest items on ``b`` until three remain."""
    while len(a) > 3:
        rotate_top(a, find_min_index(a))
        op_pb(a, b)
    sort_three(a)
    while b is not None and len(b):
        op_pa(a, b)


def sort_stack(a, b):
    """Sort ``a`` when it holds two, three or five items."""
    if a is None or len(a) <= 1:
        return
    if len(a) == 2:
        op_sa(a)
    elif len(a) == 3:
        sort_three(a)
    elif len(a) == 5:
        sort_five(a, b)