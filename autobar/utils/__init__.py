"""Utility helpers for autobar."""
