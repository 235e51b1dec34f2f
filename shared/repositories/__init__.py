"""
Wellness Shared Repositories
"""

from .base import BaseRepository, Row

__all__ = ["BaseRepository", "Row"]
