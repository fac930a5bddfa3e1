"""Command-line entry point printing the operations that sort the input."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorter import sort_values


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line; print ``Error`` on invalid input.

    Returns the process exit status.
    """
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if not args or (len(args) == 1 and not args[0]):
        return 1
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stdout.write("Error\n")
        return 1
    sys.stdout.writelines(f"{op}\n" for op in sort_values(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())