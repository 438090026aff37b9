"""Runtime configuration: env-driven.

Centralized config using pydantic-settings for environment variable support.
Reads from a .env file and PUSHSOURCE_* environment variables.

The entity type names are deployment-specific: a site that files posts under
a custom taxonomy sets ``PUSHSOURCE_SECTION_ENTITY_TYPE`` accordingly.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class PushSourceConfig(BaseSettings):
    """Push source configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export PUSHSOURCE_LOG_LEVEL=DEBUG
        export PUSHSOURCE_SECTION_ENTITY_TYPE=topic

    Or via .env file::

        PUSHSOURCE_ANONYMOUS_NAME=Guest
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PUSHSOURCE_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"

    # Entity type registry
    post_entity_type: str = "post"
    comment_entity_type: str = "comment"
    section_entity_type: str = "category"

    # Message normalization
    anonymous_name: str = "Anonymous"
    content_max_length: int = 140

    # Storage paths
    deliveries_path: Path = Path(".pushsource/deliveries")

    def entity_types(self) -> dict[str, str]:
        """Return the ``tag -> entity type name`` mapping."""
        return {
            "post": self.post_entity_type,
            "comment": self.comment_entity_type,
            "section": self.section_entity_type,
        }


# Module-level singleton: import as `from pushsource.config import config`
config = PushSourceConfig()
