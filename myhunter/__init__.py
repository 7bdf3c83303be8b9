"""A duck-shooting arcade game, with small printf-style and text helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]