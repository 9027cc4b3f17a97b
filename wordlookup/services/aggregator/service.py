"""Aggregator service: forwards lookups to the dictionary service."""

from wordlookup.services.aggregator.client import AggregatorClient
from wordlookup.services.dictionary.store import Entry


class AggregatorService:
    """
    Pass-through over AggregatorClient.

    Results are returned unchanged and failures propagate as raised by the
    client; nothing is re-wrapped here.
    """

    def __init__(self, client: AggregatorClient | None = None) -> None:
        self.client = client or AggregatorClient()

    async def get_definition_for(self, word: str) -> Entry | None:
        return await self.client.get_definition_for(word)

    async def get_words_starting_with(self, prefix: str) -> list[Entry]:
        return await self.client.get_words_starting_with(prefix)

    async def get_words_that_contain(self, substring: str) -> list[Entry]:
        return await self.client.get_words_that_contain(substring)

    async def get_words_ending_with(self, suffix: str) -> list[Entry]:
        return await self.client.get_words_ending_with(suffix)

    async def get_words_that_contain_consecutive_letters(self) -> list[Entry]:
        return await self.client.get_words_that_contain_consecutive_letters()
