"""
Command-line interface for the scrapermetrics package.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
