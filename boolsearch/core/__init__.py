"""Core entities and interfaces for boolsearch."""
