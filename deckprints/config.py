from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="DECKPRINTS_")

    app_name: str = "deckprints"
    debug: bool = False

    scryfall_api_url: str = "https://api.scryfall.com"

    # Scryfall asks every client to identify itself
    user_agent: str = "deckprints/1.0"

    request_timeout: float = 30.0

    # Courtesy spacing between outbound Scryfall requests
    request_interval_ms: int = 100

    # Follow `next_page` links on printing searches (one extra request per page)
    follow_next_page: bool = False


settings = Settings()
