"""Aggregator: a client for the dictionary service and the pass-through service on top."""

from wordlookup.services.aggregator.client import (
    AggregatorClient,
    ContractViolationError,
    DictionaryTransportError,
)
from wordlookup.services.aggregator.service import AggregatorService

__all__ = [
    "AggregatorClient",
    "AggregatorService",
    "ContractViolationError",
    "DictionaryTransportError",
]
