"""Command-line interface for sigtree."""
