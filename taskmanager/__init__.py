"""Task Manager: in-memory tasks and categories."""

__version__ = "1.0.0"
