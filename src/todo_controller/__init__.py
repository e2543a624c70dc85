"""Controller layer of a single-list todo application."""

__version__ = "0.1.0"
