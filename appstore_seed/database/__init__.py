"""
Database module - MongoDB connection and database definitions.
"""
from appstore_seed.database.connections import (
    get_mongo_client,
    close_connections,
    get_database,
    ping_server,
)
from appstore_seed.database.databases import appstore_db

__all__ = [
    "get_mongo_client",
    "close_connections",
    "get_database",
    "ping_server",
    "appstore_db",
]
