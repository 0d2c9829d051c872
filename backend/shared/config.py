"""
Centralized configuration for the auth server.

All settings are loaded from environment variables with sensible defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "DRK Launcher Auth Server"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Sessions
    access_token_ttl_seconds: int = 86400
    session_sweep_interval_seconds: int = 3600

    # Protocol
    supported_agent_name: str = "Minecraft"
    supported_agent_version: int = 1

    # Password hashing (argon2id)
    password_hash_time_cost: int = 3
    password_hash_memory_cost: int = 65536  # KiB
    password_hash_parallelism: int = 4
    min_password_length: int = 6

    # Textures
    texture_base_url: str = "https://api.drklauncher.com/textures"
    join_ttl_seconds: int = 30

    # Demo account created at startup
    seed_demo_account: bool = True
    seed_username: str = "admin"
    seed_email: str = "admin@drklauncher.com"
    seed_password: str = "admin123"
    seed_profile_name: str = "AdminPlayer"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
