"""
User model for the appstore users collection.
"""
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document model for MongoDB appstore.users collection.
    """
    id: int = Field(..., description="User identifier, unique within the collection")
    name: str = Field(..., description="Display name")
    age: Optional[int] = Field(None, description="Age in years, not set for every user")
    friend: str = Field(..., description="Name of the user's friend (may be the user)")

    def to_document(self) -> dict:
        """Document as stored in MongoDB, without unset optional fields."""
        return self.model_dump(exclude_none=True)
