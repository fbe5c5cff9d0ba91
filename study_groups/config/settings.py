"""
Application settings and configuration management.

This module centralizes all application configuration using Pydantic settings
for type validation and environment variable handling.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Main application settings class.

    Uses Pydantic BaseSettings to automatically load configuration from:
    1. Environment variables
    2. .env file
    3. Default values defined here
    """

    # Application Configuration
    debug: bool = True
    log_level: str = "INFO"

    # API Configuration
    api_v1_str: str = "/api/v1"
    project_name: str = "Study Groups"

    # Caller identity resolution
    principal_header: str = "X-Principal"
    anonymous_principal: str = "2vxsx-fae"

    # Group limits
    max_group_members: int = Field(100, ge=1)
    min_group_name_length: int = Field(3, ge=1)
    max_group_name_length: int = Field(50, ge=1)
    max_message_length: int = Field(1000, ge=1)

    # Pagination
    default_page_size: int = Field(20, ge=0)

    # Demo data loaded at startup; at most one group per built-in subject
    seed_demo_data: bool = False
    seed_group_count: int = Field(5, ge=0)
    seed_messages_per_group: int = Field(10, ge=0)

    class Config:
        """Pydantic configuration for settings loading."""
        env_file = ".env"
        case_sensitive = False


# Global settings instance
# This will be imported throughout the application for configuration access
settings = Settings()
