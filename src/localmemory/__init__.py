"""Local stand-in for a cloud document/memory service."""

__version__ = "1.0.0"
