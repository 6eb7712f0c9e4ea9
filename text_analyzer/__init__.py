"""Text statistics service: character, word and sentence counts, top words, reading time."""

__version__ = "1.0.0"
