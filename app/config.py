from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    search_base_url: str = "https://www.goodreads.com/search"
    user_agent: str = "Book Rating Lookup/0.1.0"

    # Seconds before the HTTP fetch gives up. The lookup pipeline itself
    # never times out or retries; this only bounds the outgoing request.
    fetch_timeout: float = 30.0

    cache_path: str = ".rating-cache.json"
    cache_namespace: str = "fetchGoodreadsRating:cache:"

    # Average of title and author similarity must be strictly above this.
    match_threshold: float = 0.5

    # Append "(Translator)" style role suffixes to author names.
    include_author_roles: bool = False

    log_level: str = "INFO"


settings = Settings()
