"""
Seed service for a fresh appstore database.

Creates the application user, then inserts the initial apps and users.
Every step is awaited in order and the first failure aborts the run.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, OperationFailure

from appstore_seed.database.databases import appstore_db
from appstore_seed.errors import DuplicateEntityError
from appstore_seed.fixtures import SEED_APPS, SEED_USERS, app_principal
from appstore_seed.models import App, DatabaseUser, User

logger = logging.getLogger(__name__)

# MongoDB error code for createUser on an existing user
USER_ALREADY_EXISTS = 51003


class SeedService:
    """Service for loading the initial appstore data."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the appstore database."""
        self.db = db
        self.apps_collection = db[appstore_db.Collections.APPS]
        self.users_collection = db[appstore_db.Collections.USERS]

    async def create_app_user(self, principal: DatabaseUser) -> None:
        """
        Create the application user on this database.

        Raises:
            DuplicateEntityError: If a user with this name already exists
        """
        try:
            await self.db.command("createUser", principal.user, **principal.to_command())
        except OperationFailure as e:
            if e.code == USER_ALREADY_EXISTS:
                raise DuplicateEntityError("user", principal.user) from e
            raise

        grants = ", ".join(f"{g.role}@{g.db}" for g in principal.roles)
        logger.info(f"Created user '{principal.user}' with roles: {grants}")

    async def ensure_indexes(self) -> None:
        """Create the unique identifier indexes on apps and users."""
        await appstore_db.create_appstore_indexes(self.db)

    async def insert_apps(self, apps: Sequence[App]) -> int:
        """Insert apps one by one, in order. Returns the number inserted."""
        return await self._insert_all(self.apps_collection, apps)

    async def insert_users(self, users: Sequence[User]) -> int:
        """Insert users one by one, in order. Returns the number inserted."""
        return await self._insert_all(self.users_collection, users)

    async def _insert_all(self, collection, documents) -> int:
        inserted = 0
        for model in documents:
            try:
                await collection.insert_one(model.to_document())
            except DuplicateKeyError as e:
                raise DuplicateEntityError(collection.name, model.id) from e
            inserted += 1

        logger.info(f"Inserted {inserted} documents into '{collection.name}'")
        return inserted

    async def seed(
        self,
        principal: Optional[DatabaseUser] = None,
        apps: Sequence[App] = SEED_APPS,
        users: Sequence[User] = SEED_USERS,
    ) -> dict[str, Any]:
        """
        Run the full seed: user, indexes, apps, then users.

        Returns:
            Stats dict with the principal name and insert counts

        Raises:
            DuplicateEntityError: If the user or any document already exists
        """
        principal = principal or app_principal()
        start_time = datetime.now(timezone.utc)

        logger.info(f"Seeding database '{self.db.name}'")

        await self.create_app_user(principal)
        await self.ensure_indexes()
        apps_inserted = await self.insert_apps(apps)
        users_inserted = await self.insert_users(users)

        elapsed = (datetime.now(timezone.utc) - start_time).total_seconds()

        return {
            "principal": principal.user,
            "database": self.db.name,
            "apps_inserted": apps_inserted,
            "users_inserted": users_inserted,
            "elapsed_seconds": round(elapsed, 2),
        }

    async def get_app(self, app_id: int) -> Optional[App]:
        """Get an app by its identifier."""
        doc = await self.apps_collection.find_one({"id": app_id})
        return App(**doc) if doc else None

    async def get_user(self, user_id: int) -> Optional[User]:
        """Get a user by its identifier."""
        doc = await self.users_collection.find_one({"id": user_id})
        return User(**doc) if doc else None

    async def verify(self) -> dict[str, list[int]]:
        """Identifiers currently present in apps and users, sorted. Documents without an id are skipped."""
        result = {}
        for name, collection in (
            (appstore_db.Collections.APPS, self.apps_collection),
            (appstore_db.Collections.USERS, self.users_collection),
        ):
            cursor = collection.find({"id": {"$exists": True}}, {"id": 1, "_id": 0})
            docs = await cursor.to_list(length=None)
            result[name] = sorted(doc["id"] for doc in docs)
        return result
