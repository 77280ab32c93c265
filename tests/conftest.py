"""
Global test fixtures for appstore-seed.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock / mongomock-motor)
- Seed service bound to the mock appstore database
- Patch for the createUser admin command
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest.fixture
def mock_mongo_client():
    """
    Create a mock MongoDB client using mongomock.
    
    This provides an in-memory MongoDB that behaves like the real thing
    for testing purposes.
    """
    try:
        import mongomock
        client = mongomock.MongoClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock not installed")


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_appstore_db(mock_async_mongo_client):
    """Provide an empty mock appstore database."""
    yield mock_async_mongo_client["appstore"]


# =============================================================================
# Seed Service Fixtures
# =============================================================================

@pytest.fixture
def seed_service(mock_appstore_db):
    """SeedService bound to the mock appstore database."""
    from appstore_seed.services.seed_service import SeedService
    return SeedService(mock_appstore_db)


@pytest.fixture
def mock_create_user():
    """
    Replace SeedService.create_app_user, since the in-memory server has
    no user management commands.
    
    Configure a failure with:
        mock_create_user.side_effect = DuplicateEntityError("user", "You")
    """
    with patch(
        "appstore_seed.services.seed_service.SeedService.create_app_user",
        new_callable=AsyncMock,
    ) as mocked:
        yield mocked


@pytest_asyncio.fixture
async def seeded_service(seed_service, mock_create_user):
    """SeedService whose database has already been seeded once."""
    await seed_service.seed()
    return seed_service


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def clean_settings_env(monkeypatch):
    """Remove seeder settings from the environment and reset the cache."""
    from appstore_seed.config import get_settings
    
    for name in (
        "MONGO_URI",
        "APPSTORE_DB_NAME",
        "APP_USER_NAME",
        "APP_USER_PASSWORD",
        "APP_USER_ROLE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
