"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for marklint.

    Values are read from ``MARKLINT_``-prefixed environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Tree loader limits
    max_document_size: int = 5_000_000  # characters of serialized tree
    max_node_count: int = 200_000
    max_tree_depth: int = 200
