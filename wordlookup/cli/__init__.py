"""Command-line interface for WordLookup."""
