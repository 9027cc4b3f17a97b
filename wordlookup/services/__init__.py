"""Services for dictionary lookup and aggregation."""

from wordlookup.services.aggregator import AggregatorClient, AggregatorService
from wordlookup.services.dictionary import DictionaryService, Entry, WordStore

__all__ = ["AggregatorClient", "AggregatorService", "DictionaryService", "Entry", "WordStore"]
