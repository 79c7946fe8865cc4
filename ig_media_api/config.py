from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    request_timeout: int = 30
    # Required: the process refuses to start without them.
    user_agent: str
    x_ig_app_id: str

    # Default session cookie for the cookie strategy. Empty = every request must
    # carry its own override.
    cookie: str = Field("", repr=False)

    # Anonymous GraphQL query parameters
    x_fb_lsd: str = "AVqbxe3J_YA"
    x_asbd_id: str = "129477"
    ig_doc_id: str = "10015901848480474"

    # Comma-separated origins for CORS (e.g. "https://app.example.com"). Empty = allow "*" with no credentials.
    cors_origins: str = ""

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
