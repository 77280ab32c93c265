"""
Database principal created for the application.
"""
from pydantic import BaseModel, Field


class RoleGrant(BaseModel):
    """A built-in role granted on a single database."""
    role: str = Field(..., description="Role name, e.g. readWrite")
    db: str = Field(..., description="Database the role is scoped to")


class DatabaseUser(BaseModel):
    """MongoDB user with its credential pair and role grants."""
    user: str
    pwd: str
    roles: list[RoleGrant] = Field(default_factory=list)

    def to_command(self) -> dict:
        """Keyword arguments for the createUser database command."""
        return {
            "pwd": self.pwd,
            "roles": [grant.model_dump() for grant in self.roles],
        }
