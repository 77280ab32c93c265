"""
Database definitions and collection constants.
"""
from appstore_seed.database.databases import appstore_db

__all__ = ["appstore_db"]
