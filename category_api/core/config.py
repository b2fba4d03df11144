"""
Application configuration settings
"""

from pydantic_settings import BaseSettings
from typing import Dict, List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    ALLOWED_HOSTS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Site registry file (sources, per-user access, filter policy)
    SITE_CONFIG_PATH: Optional[str] = None

    # Authentication cookie
    AUTH_COOKIE_NAME: str = "auth"

    # Upstream provider requests
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0
    UPSTREAM_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
    )
    UPSTREAM_ACCEPT: str = "application/json"

    # Content filter overrides (None = use the site config file)
    DISABLE_CONTENT_FILTER: Optional[bool] = None
    BANNED_TERMS: List[str] = []

    # Monitoring and Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def default_upstream_headers(self) -> Dict[str, str]:
        """Headers sent to every provider unless a site overrides them"""
        return {
            "User-Agent": self.UPSTREAM_USER_AGENT,
            "Accept": self.UPSTREAM_ACCEPT,
        }


def validate_settings(settings: Settings) -> None:
    """Validate required settings in production"""
    if settings.ENVIRONMENT != "production":
        return

    required_settings = ["SITE_CONFIG_PATH"]

    missing_settings = []
    for setting in required_settings:
        if not getattr(settings, setting):
            missing_settings.append(setting)

    if missing_settings:
        raise ValueError(f"Missing required production settings: {', '.join(missing_settings)}")


# Create settings instance
settings = Settings()
validate_settings(settings)
