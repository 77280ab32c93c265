"""
Seeder configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Seeder settings from environment variables."""
    
    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    appstore_db_name: str = "appstore"
    
    # Application principal created on first start
    app_user_name: str = "You"
    app_user_password: str = "SuperSecure"
    app_user_role: str = "readWrite"
    
    # Logging
    log_level: str = "INFO"
    
    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
