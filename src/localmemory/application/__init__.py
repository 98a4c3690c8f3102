"""Application services: document operations, settings and fixtures."""
