"""Utility helpers shared across the library."""
