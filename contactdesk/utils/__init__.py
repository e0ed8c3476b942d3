"""Shared view helpers."""
