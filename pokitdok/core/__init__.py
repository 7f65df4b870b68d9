"""Core modules: HTTP layer and endpoint services."""
