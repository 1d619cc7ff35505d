# src/app/__init__.py
"""
Application helpers shared by the command-line entrypoints.
"""

from __future__ import annotations

from .logging_config import configure_logging

__all__ = [
    "configure_logging",
]
