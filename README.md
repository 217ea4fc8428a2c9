# pushswap

Give it a list of distinct integers and it prints the stack operations that
sort them in ascending order, one per line, on standard output.

The operations it uses, on stack `a` (whose top is the first argument) and a
helper stack `b`:

- `sa`: swap the first two elements of `a`
- `ra`: rotate `a` up, so the first element becomes the last
- `rra`: rotate `a` down, so the last element becomes the first
- `pb`: move the top element of `a` onto `b`
- `pa`: move the top element of `b` onto `a`

## Install

    pip install .

## Use

    pushswap 2 1 3
    sa

    pushswap 3 2 1
    sa
    rra

    pushswap 3 1 2
    ra

If every argument is valid and the list is already sorted, nothing is printed
and the exit status is 0. With no arguments, nothing happens at all.

An argument is valid if it:

- is made of ASCII digits, with an optional leading `+` or `-`
- converts to a value that fits in a signed 32-bit integer
- does not convert to the same value as an earlier argument

If any argument breaks one of these rules, `Error` is written to standard
error and the exit status is 1.

### How signed arguments are read

Arguments are converted by `pushswap.validation.atol`, which folds every
character, sign characters included, into the number as its offset from `'0'`,
and makes the result negative if a `-` appears. Unsigned arguments read as
you would expect, but signed ones do not: `-5` reads as `25` and `+5` as
`-45`. The range and duplicate checks apply to these converted values, so
`-5` and `25` count as the same value. Use unsigned numbers for plain results.

## From Python

    from pushswap.stack import Stack
    from pushswap.sorting import sort_stack
    from pushswap.validation import parse_arguments, is_valid

    is_valid(["3", "1", "2"])          # True
    parse_arguments(["3", "1", "2"])   # [3, 1, 2]
    a = Stack.from_args(["3", "1", "2"])
    b = Stack()
    sort_stack(a, b)                   # prints "ra"
    a.values()                         # [1, 2, 3]

`parse_arguments` raises `InvalidInputError` (a `ValueError`) when the input
is not valid. `Stack` also has `push_back`, `is_sorted`, `len()` and
iteration; `pushswap.sorting` exposes each operation (`op_sa`, `op_ra`,
`op_rra`, `op_pa`, `op_pb`) and the pieces of the strategy (`sort_three`,
`sort_five`, `find_min_index`, `rotate_top`).

## What it does not do

Only lists of two, three or five values are sorted. Lists of four, or of six
or more values, are validated but no operations are printed and they are left
as they are. There is no checker that reads a list of operations and applies
them.

## Tests

    pip install .[test]
    pytest