"""Sort typed containers into their own stacks, one move at a time."""

__version__ = "0.1.0"
__all__ = ["algorithms", "cli"]