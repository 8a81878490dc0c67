"""
modport utilities package
"""

from .text import line_and_column, excerpt_at

__all__ = ["line_and_column", "excerpt_at"]
