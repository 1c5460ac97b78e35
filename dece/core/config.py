"""Application configuration with environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Local store (SQLite file, or ":memory:")
    DATABASE_PATH: str = "gestion_dece.db"

    # Populate demonstration data the first time a store is created
    SEED_ON_CREATE: bool = True

    # Seed volumes
    SEED_TEACHERS: int = 25
    SEED_REPRESENTATIVES: int = 150
    SEED_STUDENTS: int = 200
    SEED_CASE_FILES: int = 50

    # Password / security answer hashing cost
    BCRYPT_ROUNDS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    # Where export-backup writes dece_backup_YYYY-MM-DD.json
    BACKUP_DIR: str = "backups"


def sqlite_url(path: str) -> str:
    """Build a pysqlite URL for a file path (":memory:" stays in memory)."""
    if path == ":memory:":
        return "sqlite+pysqlite:///:memory:"
    return f"sqlite+pysqlite:///{path}"


settings = Settings()
