from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv(".env")


class Settings(BaseSettings):
    valid_categories: list[str] = ["Autobiography", "Large Print Romance", "Particle Physics"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    settings = Settings()
    if not settings.valid_categories:
        raise RuntimeError("At least one valid category must be configured")
    if any(not name for name in settings.valid_categories):
        raise RuntimeError("Empty category name in valid_categories")
    return settings
