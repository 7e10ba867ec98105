"""Utility helpers for mddoc."""
