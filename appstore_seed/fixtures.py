"""
Initial data for a fresh appstore database.

Documents are inserted in the order listed here.
"""
from appstore_seed.config import Settings, get_settings
from appstore_seed.models import App, DatabaseUser, Right, RoleGrant, User, UserSnapshot


SEED_APPS = [
    App(
        id=2,
        name="Arnold's App",
        stars=3,
        rights=[
            Right(
                right="OWNER",
                user=UserSnapshot(id=1, name="Arnold", age=72, friend="John Connor"),
            ),
        ],
    ),
    App(id=1, name="First App for everyone", stars=1),
    App(id=3, name="Famous App", stars=5),
]

SEED_USERS = [
    User(id=1, name="Arnold", age=72, friend="John Connor"),
    User(id=2, name="Kevin", age=21, friend="Kevin"),
    User(id=3, name="Anyone", friend="Anyone"),
    User(id=4, name="Torben", age=42, friend="Daniel"),
]


def app_principal(settings: Settings | None = None) -> DatabaseUser:
    """The application user, with read-write access to the appstore database only."""
    settings = settings or get_settings()
    return DatabaseUser(
        user=settings.app_user_name,
        pwd=settings.app_user_password,
        roles=[RoleGrant(role=settings.app_user_role, db=settings.appstore_db_name)],
    )
