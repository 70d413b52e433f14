"""Shortening application layer."""
