"""Bible corpus compiler and reference reader."""

__version__ = "0.1.0"
