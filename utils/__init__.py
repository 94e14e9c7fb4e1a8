"""Shared utilities: logging setup and filesystem helpers."""
