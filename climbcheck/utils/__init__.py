"""Shared helpers for unit conversion and display rounding."""
