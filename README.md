# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations. It prints the operations it performs, one per
line, so that applying them in order to the input leaves stack `a` sorted
in ascending order and stack `b` empty.

## Installing

```
pip install .
```

## Command line

Pass the numbers either as separate arguments or as one space-separated
string:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

For `push-swap 3 2 1` the output is:

```
ra
sa
```

If the input is already sorted, nothing is printed and the exit status is
0. With no arguments, or with a single empty argument, the command exits
with status 1 and prints nothing. If any value is not an integer (an
optional `+` or `-` followed by digits), lies outside the 32-bit signed
range, or is repeated, `Error` is printed on standard output and the exit
status is 1.

### Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

## Library use

```python
from pushswap.sorter import sort_values
from pushswap.stack import Stacks

ops = sort_values([3, 2, 1])      # ['ra', 'sa']
stacks = Stacks([3, 2, 1])
for op in ops:
    stacks.apply(op)
print(stacks.values("a"))         # [1, 2, 3]
print(stacks.operations)          # ['ra', 'sa']
```

`Stacks.apply` raises `ValueError` for an unknown operation name.
`pushswap.parsing.parse_arguments` validates command-line style input and
raises `pushswap.parsing.InputError` (a `ValueError`) when it is invalid.

The package also includes small helpers that the tool is built on:

- `pushswap.chars`: ASCII character tests, `toupper`/`tolower`, `atoi` and `itoa`
- `pushswap.memory`: byte-buffer helpers (`memset`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc`, ...)
- `pushswap.strings`: string helpers (`strchr`, `strncmp`, `strlcpy`, `split`, `strtrim`, ...)
- `pushswap.linkedlist`: a singly linked list, `LinkedList`
- `pushswap.output`: write characters, strings and numbers to a text stream
- `pushswap.printf`: a minimal printf supporting `%c %s %p %d %i %u %x %X %%`;
  `format_printf` returns the text and `printf` writes it to a stream
  (stdout by default) and returns the number of characters written

## Tests

```
pip install ".[test]"
pytest
```