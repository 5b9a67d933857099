"""Concise network diagnostic overview for Linux hosts."""

__version__ = "0.1.0"
