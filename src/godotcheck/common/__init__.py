"""Shared helpers for godotcheck components."""
