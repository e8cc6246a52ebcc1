"""REST API for blogstore."""
