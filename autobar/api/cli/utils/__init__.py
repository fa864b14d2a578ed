"""Shared utilities for autobar CLI commands."""

from .rich_output import RichOutputFormatter

__all__ = ["RichOutputFormatter"]
