import httpx
import pytest_asyncio
from fastapi import FastAPI
from httpx import AsyncClient

from md2delta.api import create_app
from md2delta.config import Settings


@pytest_asyncio.fixture(scope="function")
async def app() -> FastAPI:
    settings = Settings(
        _env_file=None,
        collapse_soft_line_breaks=True,
        max_markdown_chars=200,
        max_tree_nodes=10,
        log_level="DEBUG",
        log_dir=None,
        cors_origins=["*"],
    )

    app = create_app(settings)

    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app):
    """Test client against the in-process app."""
    async with AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
        yield client
