"""Classic algorithms: sorting, searching, CPU scheduling, small data structures and dynamic programming."""

__version__ = "0.1.0"