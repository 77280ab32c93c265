"""
Document models for the appstore database.
"""
from appstore_seed.models.app import App, Right, UserSnapshot
from appstore_seed.models.principal import DatabaseUser, RoleGrant
from appstore_seed.models.user import User

__all__ = ["App", "Right", "UserSnapshot", "DatabaseUser", "RoleGrant", "User"]
