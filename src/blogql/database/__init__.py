"""
Database module for blogql
"""

from .client import DataClient
from .connection import Database

__all__ = ["DataClient", "Database"]
