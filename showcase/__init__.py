"""Project Showcase API: a read-only portfolio catalogue served over HTTP."""

__version__ = "1.0.0"
