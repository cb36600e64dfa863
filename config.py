"""Configuration settings for the Preset Engine."""

from dotenv import load_dotenv

load_dotenv()

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Dict
from pathlib import Path


# Recommendation dimensions in canonical output order
DIMENSIONS = ("aiProviders", "features", "security", "deployment", "integrations", "stack")


class Settings(BaseSettings):
    """Global settings for the Preset Engine.

    Settings can be overridden via environment variables with PRESET_ENGINE_ prefix.
    Example: PRESET_ENGINE_LOG_LEVEL=DEBUG
    """

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Root log level used by the CLI"
    )

    # Output
    output_dir: str = Field(
        default="./outputs",
        description="Directory the build command writes documents to"
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        description="Indentation of JSON printed by the CLI"
    )

    # Recommendations
    recommendation_limits: Dict[str, int] = Field(
        default_factory=lambda: {
            "aiProviders": 4,
            "features": 6,
            "security": 5,
            "deployment": 4,
            "integrations": 5,
            "stack": 5,
        },
        description="Maximum suggestions per dimension before tie extension"
    )

    model_config = {
        "env_prefix": "PRESET_ENGINE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def get_output_path(self) -> Path:
        """Get output path as Path object."""
        return Path(self.output_dir)

    def limit_for(self, dimension: str) -> int:
        """Cap for a recommendation dimension."""
        if dimension not in DIMENSIONS:
            raise KeyError(f"Unknown recommendation dimension '{dimension}'")
        return self.recommendation_limits.get(dimension, 5)


# Create singleton instance
settings = Settings()
