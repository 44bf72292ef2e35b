"""CLI handler base classes."""
