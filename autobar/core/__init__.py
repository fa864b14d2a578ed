"""Core configuration, errors and path helpers."""
