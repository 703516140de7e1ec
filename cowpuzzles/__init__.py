"""Functions and commands that solve eight bronze-level programming puzzles about cows."""

__version__ = "0.1.0"