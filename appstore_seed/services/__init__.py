"""
Service layer for seeding the appstore database.
"""
from appstore_seed.services.seed_service import SeedService

__all__ = ["SeedService"]
