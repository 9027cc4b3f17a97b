"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import wordlookup.models  # noqa: F401  # registers tables on Base.metadata
from wordlookup.database import Base
from wordlookup.dictionary_app import create_app
from wordlookup.services.aggregator import AggregatorClient
from wordlookup.services.dictionary import Entry, WordStore

DICTIONARY_URL = "http://localhost:9091"


@pytest.fixture
async def async_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def async_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with async_session_maker() as session:
        yield session


@pytest.fixture
def sample_entries() -> list[Entry]:
    """A small dictionary covering every query kind."""
    return [
        Entry("apple", "fruit"),
        Entry("app", "application"),
        Entry("book", "bound pages"),
        Entry("deer", "animal"),
        Entry("test", "trial"),
        Entry("testing", "trying out"),
        Entry("running", "moving fast"),
        Entry("walking", "moving slowly"),
    ]


@pytest.fixture
def word_store(sample_entries: list[Entry]) -> WordStore:
    return WordStore(sample_entries)


@pytest.fixture
def dictionary_app(word_store: WordStore) -> FastAPI:
    """Dictionary service app over the sample store."""
    return create_app(word_store)


@pytest.fixture
def dictionary_client(dictionary_app: FastAPI) -> TestClient:
    """Create a synchronous test client for the dictionary service."""
    return TestClient(dictionary_app)


@pytest.fixture
async def make_aggregator_client() -> AsyncGenerator[Callable[..., AggregatorClient], None]:
    """Build AggregatorClients whose HTTP calls go to a handler function."""
    http_clients: list[httpx.AsyncClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> AggregatorClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return AggregatorClient(base_url=DICTIONARY_URL, http_client=http_client)

    yield _make

    for http_client in http_clients:
        await http_client.aclose()

