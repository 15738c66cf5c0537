"""Application configuration from environment variables."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL
from functools import lru_cache

# Store location is fixed; only credentials come from the environment
DB_DRIVER = "mysql+pymysql"
DB_HOST = "127.0.0.1"
DB_PORT = 3306
DB_NAME = "recordings"

LISTEN_HOST = "localhost"
LISTEN_PORT = 8080


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database credentials (DBUSER / DBPASS)
    dbuser: str = ""
    dbpass: str = ""

    # Full SQLAlchemy URL, overrides the composed MySQL URL when set
    database_url: str = ""

    # Logging
    log_level: str = "info"
    log_path: str = ""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def store_url(self) -> str:
        """SQLAlchemy URL of the backing store."""
        if self.database_url:
            return self.database_url
        return URL.create(
            DB_DRIVER,
            username=self.dbuser or None,
            password=self.dbpass or None,
            host=DB_HOST,
            port=DB_PORT,
            database=DB_NAME,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
