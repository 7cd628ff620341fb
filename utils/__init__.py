"""Helpers: result export and logging setup."""
