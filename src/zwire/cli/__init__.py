"""Command-line interface for zwire."""
