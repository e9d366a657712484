"""
Pytest configuration and fixtures for spell-check tests.
"""
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from wordcheck.main import app
from wordcheck.services.context import SpellCheckContext
from wordcheck.services.dictionary import Dictionary


# Small vocabulary used by the document scenarios
SCENARIO_WORDS = [
    "this",
    "is",
    "an",
    "example",
    "text",
    "with",
    "some",
    "correct",
    "words",
]


@pytest.fixture
def dictionary() -> Dictionary:
    """Fresh dictionary holding the scenario vocabulary."""
    return Dictionary.load(SCENARIO_WORDS)


@pytest.fixture
def context(dictionary: Dictionary) -> SpellCheckContext:
    """Context over the scenario dictionary with default limits and caching on."""
    return SpellCheckContext(
        dictionary,
        max_edit_distance=2,
        suggestion_count=5,
        cache_enabled=True,
    )


@pytest.fixture
def wordlist_path(tmp_path):
    """Word list file with mixed case, padding and blank lines."""
    path = tmp_path / "words.txt"
    path.write_text("Example\n\n  text  \nWORDS\n\ncorrect\n", encoding="utf-8")
    return path


@pytest.fixture
async def client(context: SpellCheckContext) -> AsyncGenerator[AsyncClient, None]:
    """
    Async test client for the FastAPI application.

    The lifespan handler is not run by ASGITransport, so the test context is
    installed on app.state directly.
    """
    app.state.spellcheck = context

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.state.spellcheck = None
