"""
Configuration for cricut-finder.

Directory layout and logging defaults, validated with pydantic.
"""

from pydantic import BaseModel, Field
from typing import Literal


class Settings(BaseModel):
    """Application settings with fixed defaults."""

    # Directory Layout
    anchor_dir_name: str = Field(
        default=".cricut-design-space",
        min_length=1,
        description="Application directory directly under the user's home",
    )
    data_dir_name: str = Field(
        default="LocalData", min_length=1, description="Project data directory under the anchor"
    )
    canvas_dir_name: str = Field(
        default="Canvas", min_length=1, description="Canvas directory inside each project"
    )

    # Matching
    image_token: str = Field(
        default=".png",
        min_length=1,
        description="Extension token matched as a substring, lowercase or uppercase",
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Logging format - text for human-readable, json for structured logs"
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    return settings
