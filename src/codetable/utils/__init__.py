"""Misc. utilities."""
