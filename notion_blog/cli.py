"""
Command-line interface for the Notion blog adapter.

Uses Typer to list the articles of the Notion database and to render a
single article to an HTML file. Supports loading .env files for the
integration token and database ID.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .config import AppConfig, get_database_id, load_config
from .core.types import Article
from .notion.client import create_client, get_database
from .runner import get_article_from_notion
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
console = Console()


def _prepare(config: Path | None, log_level: str | None, log_dir: Path | None) -> AppConfig:
    # Load environment variables from .env if available
    load_dotenv()
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    if log_dir is not None:
        cfg.logging.file = True
    setup_logging(cfg.logging, log_dir)
    return cfg


def _require_database_id(cfg: AppConfig) -> str:
    database_id = get_database_id(cfg.notion)
    if not database_id:
        raise typer.BadParameter(f"Database ID is not configured (set {cfg.notion.database_id_env})")
    return database_id


async def _list_articles(cfg: AppConfig, database_id: str) -> list[Article]:
    client = create_client(cfg.notion)
    try:
        return await get_database(client, database_id, cfg.site.site_url)
    finally:
        await client.aclose()


@app.command()
def articles(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Write a log file here."),
):
    """List the articles of the Notion database."""
    cfg = _prepare(config, log_level, log_dir)
    database_id = _require_database_id(cfg)
    posts = asyncio.run(_list_articles(cfg, database_id))

    table = Table(title="Articles")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Date")
    table.add_column("Status")
    for post in posts:
        table.add_row(post.slug, post.data.title, post.data.date, post.data.status)
    console.print(table)


@app.command()
def render(
    slug: str = typer.Argument(..., help="Slug of the article to render."),
    output: Path = typer.Option(Path("article.html"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_dir: Path | None = typer.Option(None, "--log-dir", help="Write a log file here."),
):
    """Render one article to an HTML file.

    Args:
        slug: Slug of the article
        output: Path of the HTML file to write
        config: Optional path to YAML config file
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for the log file; enables file logging
    """
    cfg = _prepare(config, log_level, log_dir)
    database_id = _require_database_id(cfg)

    async def _render():
        # AsyncClient's own context manager swaps in a default httpx client
        client = create_client(cfg.notion)
        try:
            return await get_article_from_notion(
                client,
                slug,
                database_id,
                cfg.site.site_url,
                page_size=cfg.notion.page_size,
            )
        finally:
            await client.aclose()

    response = asyncio.run(_render())
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(response.article.content, encoding="utf-8")
    console.print(f"Article rendered: {output} ({response.article.permalink})")


if __name__ == "__main__":
    app()
