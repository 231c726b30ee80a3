"""Sort integers with two stacks and a fixed set of moves, and check move lists."""

__version__ = "1.0.0"
__all__ = ["__version__"]