"""Utility helpers for the character wizard."""
