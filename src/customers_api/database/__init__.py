"""
Database module for the Customers API
"""

from .connection import Database, init_database

__all__ = ["Database", "init_database"]
