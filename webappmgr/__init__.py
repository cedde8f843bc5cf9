"""Helpers for a web application manager: tags, URLs, status, timers and logging."""

__version__ = "0.1.0"