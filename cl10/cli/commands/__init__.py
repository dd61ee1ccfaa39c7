"""Subcommand implementations for the cl10 command line."""
