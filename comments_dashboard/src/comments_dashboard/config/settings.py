"""
Configuration settings for the comments dashboard.

This module handles environment variable loading and configuration management
using Pydantic for validation and type safety.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Comments dashboard configuration settings.
    
    All settings can be overridden via environment variables.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Remote API Configuration
    api_base_url: str = Field(
        default="https://jsonplaceholder.typicode.com",
        description="Base URL of the remote comments/users API"
    )
    api_timeout: int = Field(
        default=10,
        description="Timeout in seconds for API requests"
    )
    api_retries: int = Field(
        default=0,
        description="Retry attempts on transport errors and 5xx responses"
    )
    
    # Dashboard Configuration
    debug_mode: bool = Field(
        default=True,
        description="Enable debug mode"
    )
    
    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_format: str = Field(
        default="text",
        description="Logging format (json or text)"
    )
    
    # Table preferences storage
    state_file: str = Field(
        default=".comments_dashboard/state.json",
        description="JSON file holding the persisted table preferences"
    )
    default_page_size: int = Field(
        default=10,
        description="Page size used when none is stored"
    )
    
    # Profile
    profile_user_index: int = Field(
        default=1,
        description="Position of the displayed user in the users response"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    
    Returns:
        Settings: Configured settings instance
    """
    return Settings()
