"""Shared utilities: HTTP connection pooling and logging setup."""
