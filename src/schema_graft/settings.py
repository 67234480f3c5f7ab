from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaGraftSettings(BaseSettings):
    """Configuration for schema-graft.

    Environment variables are prefixed with SCHEMA_GRAFT_.
    """

    model_config = SettingsConfigDict(env_prefix="SCHEMA_GRAFT_", extra="ignore")

    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Taxonomy source ---
    ecs_root: str | None = Field(default=None, description="Path to a checkout of the ECS repo")
    ecs_version: str | None = Field(default=None, description="ECS tag, branch or sha")
    nested_path: str = Field(default="generated/ecs/ecs_nested.yml")

    # --- Decoding ---
    strict_fields: bool = Field(default=True, description="Reject unknown keys in documents")


settings = SchemaGraftSettings()
