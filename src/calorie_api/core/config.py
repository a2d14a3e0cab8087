"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    db_name: str = "fitness_db"
    users_collection: str = "users"

    # External nutrition source (API Ninjas)
    nutrition_api_key: str = ""
    nutrition_api_base_url: str = "https://api.api-ninjas.com/v1/nutrition"
    nutrition_api_timeout: float | None = None  # None = transport default

    # Auth
    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    auth_cookie_name: str = "authToken"

    # Calendar day boundaries for date queries
    timezone: str = "UTC"

    # App
    route_prefix: str = "/calorieintake"
    log_level: str = "INFO"
    debug: bool = False
    app_name: str = "Calorie Intake API"
    api_version: str = "1.0.0"

    @property
    def is_nutrition_configured(self) -> bool:
        """Check if the nutrition lookup provider has an API key."""
        return bool(self.nutrition_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
