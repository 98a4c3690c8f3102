"""Infrastructure adapters (file-based persistence)."""
