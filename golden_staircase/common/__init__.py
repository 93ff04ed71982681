"""Shared constants and seeding helpers."""
