"""Bundled data files for artifact-cleaner."""
