"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- NotionConfig: Notion API credentials and client settings
- SiteConfig: Blog site settings used to build permalinks
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml


@dataclass
class NotionConfig:
    """Configuration for the Notion API client.

    Attributes:
        token: Optional inline integration token (overrides env var)
        token_env: Environment variable name containing the integration token
        database_id: Optional inline ID of the articles database
        database_id_env: Environment variable name containing the database ID
        notion_version: Value sent in the Notion-Version header
        timeout_seconds: HTTP request timeout
        trust_env: Whether to respect system proxy settings
        page_size: Items requested per page on list endpoints (max 100)
    """

    token: str | None = None
    token_env: str = "NOTION_TOKEN"
    database_id: str | None = None
    database_id_env: str = "NOTION_DATABASE_ID"
    notion_version: str = "2022-06-28"
    timeout_seconds: float = 60.0
    trust_env: bool = True
    page_size: int = 100


@dataclass
class SiteConfig:
    """Configuration for the blog site.

    Attributes:
        site_url: Base URL prepended to every article permalink
    """

    site_url: str = "http://localhost:3000"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "notion_blog.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    notion: NotionConfig = field(default_factory=NotionConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "notion": {
            "token": cfg.notion.token,
            "token_env": cfg.notion.token_env,
            "database_id": cfg.notion.database_id,
            "database_id_env": cfg.notion.database_id_env,
            "notion_version": cfg.notion.notion_version,
            "timeout_seconds": cfg.notion.timeout_seconds,
            "trust_env": cfg.notion.trust_env,
            "page_size": cfg.notion.page_size,
        },
        "site": {
            "site_url": cfg.site.site_url,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        notion=NotionConfig(**data["notion"]),
        site=SiteConfig(**data["site"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_notion_token(cfg: NotionConfig) -> str | None:
    """Get the Notion integration token from inline config or environment variable."""
    if cfg.token:
        return cfg.token
    return os.getenv(cfg.token_env)


def get_database_id(cfg: NotionConfig) -> str | None:
    """Get the articles database ID from inline config or environment variable."""
    if cfg.database_id:
        return cfg.database_id
    return os.getenv(cfg.database_id_env)
