"""Command line interface for blogstore."""
