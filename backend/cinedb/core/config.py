from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "cinedb"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False

    TMDB_KEY: str = ""
    TMDB_READ_ACCESS_TOKEN: str | None = None
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_LANGUAGE: str | None = None
    TMDB_TIMEOUT_SECONDS: float = 10.0

    LOG_DIR: str = "logs"
    LOG_TIMEZONE: str = "Europe/Amsterdam"


settings = Settings()  # type: ignore
