"""Conversion and parsing helpers."""
