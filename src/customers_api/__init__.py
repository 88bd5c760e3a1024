"""
Customers API
GraphQL service for registering and managing customers
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
