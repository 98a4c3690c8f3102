"""Core domain, protocols and shared utilities."""
