"""Version information for kontent-kit."""

__version__ = "0.1.0"
