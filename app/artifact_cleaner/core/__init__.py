"""Core infrastructure: paths, theme and logging setup."""
