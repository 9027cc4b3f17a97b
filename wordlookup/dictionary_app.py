"""Dictionary service FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from wordlookup import __version__
from wordlookup.config import settings
from wordlookup.database import async_session, init_db
from wordlookup.logging_config import setup_logging
from wordlookup.routes import dictionary_router
from wordlookup.services.dictionary import DictionaryService, WordStore
from wordlookup.services.dictionary.loader import load_word_store, seed_if_empty

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the word store from the database unless one was supplied."""
    logger.info("Starting dictionary service...")

    if getattr(app.state, "dictionary_service", None) is None:
        await init_db()
        async with async_session() as session:
            await seed_if_empty(session, settings.seed_file)
            store = await load_word_store(session)
        app.state.dictionary_service = DictionaryService(store)

    yield

    logger.info("Shutting down dictionary service...")


def create_app(store: WordStore | None = None) -> FastAPI:
    """
    Create the dictionary service application.

    Args:
        store: Preloaded word store. When omitted, the store is loaded from
            the database at startup.
    """
    app = FastAPI(
        title="WordLookup Dictionary",
        description="Word lookup and pattern matching over a fixed dictionary",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.dictionary_service = DictionaryService(store) if store is not None else None
    app.include_router(dictionary_router)

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Health check endpoint."""
        service: DictionaryService | None = request.app.state.dictionary_service
        return {
            "status": "healthy",
            "version": __version__,
            "words": service.word_count if service is not None else 0,
        }

    return app


def run(reload: bool = False, host: str | None = None, port: int | None = None) -> None:
    """Run the dictionary service with uvicorn."""
    import uvicorn

    uvicorn.run(
        "wordlookup.dictionary_app:create_app",
        factory=True,
        host=host or settings.dictionary_host,
        port=port or settings.dictionary_port,
        reload=reload,
    )


if __name__ == "__main__":
    setup_logging()
    run()
