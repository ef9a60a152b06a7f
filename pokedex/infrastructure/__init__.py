"""Infrastructure layer: I/O against external services."""
