"""Command line interface for boolsearch."""
