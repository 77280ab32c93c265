"""
App model for the appstore apps collection.
"""
from pydantic import BaseModel, Field

from appstore_seed.models.user import User


class UserSnapshot(User):
    """Copy of a user embedded in a right. Not kept in sync with the users collection."""


class Right(BaseModel):
    """A role held by a user on an app."""
    right: str = Field(..., description="Role label, e.g. OWNER")
    user: UserSnapshot = Field(..., description="Embedded user snapshot")


class App(BaseModel):
    """
    App document model for MongoDB appstore.apps collection.
    """
    id: int = Field(..., description="App identifier, unique within the collection")
    name: str = Field(..., description="App name")
    stars: int = Field(..., description="Star rating")
    rights: list[Right] = Field(
        default_factory=list,
        description="Rights on this app, absent in storage when empty"
    )

    def to_document(self) -> dict:
        """Document as stored in MongoDB, without unset optional fields."""
        doc = self.model_dump(exclude_none=True)
        if not doc["rights"]:
            del doc["rights"]
        return doc
