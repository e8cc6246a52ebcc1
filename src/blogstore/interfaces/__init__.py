"""User-facing interfaces for blogstore."""
