"""Command-line interface for cl10."""
