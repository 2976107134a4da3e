"""Utility helpers for the comments dashboard."""
