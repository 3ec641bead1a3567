"""Sort distinct integers with two stacks and a short sequence of stack operations."""

__version__ = "1.0.0"