"""Classic sorting algorithms: counting, radix, comparison and quicksort variants, with a traced quicksort and a command line tool."""

__version__ = "0.1.0"
__all__ = ["cli", "comparison", "counting", "quicksort", "radix", "trace"]