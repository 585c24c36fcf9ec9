"""Command-line interface for ts48."""
