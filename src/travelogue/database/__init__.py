"""
Database module for the Travelogue backend
"""

from .connection import close_database, create_schema, get_async_session, init_database

__all__ = ["close_database", "create_schema", "get_async_session", "init_database"]
