"""Application configuration via Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///./oracle_core.db"

    # Dice
    default_seed: int | None = None  # None draws a fresh seed per stateless roll
    max_dice_count: int = 100

    # History
    history_page_size: int = 50
    history_max_page_size: int = 500

    # Admin dashboard (bcrypt hash; empty disables /admin)
    admin_password_hash: str = ""
    admin_secret_key: str = "change-me-in-production"

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_debug: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def database_url_sync(self) -> str:
        """Sync version of database_url for Alembic CLI."""
        return self.database_url.replace("+aiosqlite", "").replace("+asyncpg", "")


settings = Settings()
