"""Sort integers with two stacks, reporting the operations used, plus small string, memory, list and printf helpers."""

__version__ = "0.1.0"