"""Route handlers for the dictionary and aggregator services."""

from wordlookup.routes.aggregator import router as aggregator_router
from wordlookup.routes.dictionary import router as dictionary_router

__all__ = [
    "aggregator_router",
    "dictionary_router",
]
