import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    collapse_soft_line_breaks: bool = True  # join soft-wrapped lines with a single space
    max_markdown_chars: int = 1_000_000
    max_tree_nodes: int = 100_000  # per /v1/deltas/tree request

    log_level: str = "INFO"
    log_dir: Path | None = None  # JSONL log sink is only added when set

    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="MD2DELTA_",
        env_file=[os.getenv("ENV_FILE", ""), ".env"],
        extra="ignore",
        env_nested_delimiter="__",
    )


def get_settings() -> Settings:  # ty: ignore[invalid-return-type]
    """This is only used for dependency references, see md2delta/api/__init__.py:

    app.dependency_overrides[get_settings] = lambda: settings
    """
    ...
