"""Sky positions of stars, moon and planets, and their projection onto a screen."""

__version__ = "0.1.0"