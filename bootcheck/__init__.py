"""Boot log classification for Rustica OS installer images."""

__version__ = "0.1.0"
