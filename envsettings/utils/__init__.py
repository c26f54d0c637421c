"""Shared utilities: logging and environment classification."""
