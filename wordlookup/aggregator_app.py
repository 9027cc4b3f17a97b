"""Aggregator service FastAPI application."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from wordlookup import __version__
from wordlookup.config import settings
from wordlookup.logging_config import setup_logging
from wordlookup.routes import aggregator_router
from wordlookup.services.aggregator import (
    AggregatorClient,
    AggregatorService,
    ContractViolationError,
    DictionaryTransportError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open one HTTP connection pool to the dictionary service for the app's lifetime."""
    logger.info(f"Starting aggregator for {settings.dictionary_service_url}...")

    if getattr(app.state, "aggregator_service", None) is not None:
        yield
    else:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as http_client:
            app.state.aggregator_service = AggregatorService(
                AggregatorClient(http_client=http_client)
            )
            yield
            app.state.aggregator_service = None

    logger.info("Shutting down aggregator...")


async def _upstream_failure(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Dictionary service failure on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=502,  # Bad Gateway
        content={"detail": f"Dictionary service failure: {exc}"},
    )


def create_app(service: AggregatorService | None = None) -> FastAPI:
    """
    Create the aggregator application.

    Args:
        service: Prebuilt aggregator service. When omitted, one is created at
            startup against settings.dictionary_service_url.
    """
    app = FastAPI(
        title="WordLookup Aggregator",
        description="Forwards word lookups to the dictionary service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.aggregator_service = service
    app.include_router(aggregator_router)
    app.add_exception_handler(DictionaryTransportError, _upstream_failure)
    app.add_exception_handler(ContractViolationError, _upstream_failure)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "dictionary_service_url": settings.dictionary_service_url,
        }

    return app


def run(reload: bool = False, host: str | None = None, port: int | None = None) -> None:
    """Run the aggregator with uvicorn."""
    import uvicorn

    uvicorn.run(
        "wordlookup.aggregator_app:create_app",
        factory=True,
        host=host or settings.aggregator_host,
        port=port or settings.aggregator_port,
        reload=reload,
    )


if __name__ == "__main__":
    setup_logging()
    run()
