"""A linked-list FIFO queue of integers with statistics, in-place edits and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "edits", "queue", "stats"]