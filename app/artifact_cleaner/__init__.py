"""artifact-cleaner - find and remove build and cache artifact directories."""

__version__ = "0.1.0"
