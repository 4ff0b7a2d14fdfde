"""Infrastructure layer: logging and filesystem operations."""
