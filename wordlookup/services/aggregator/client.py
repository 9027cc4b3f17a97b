"""HTTP client for the dictionary service, used by the aggregator."""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from wordlookup.config import settings
from wordlookup.services.dictionary.store import Entry

logger = logging.getLogger(__name__)


class DictionaryTransportError(Exception):
    """The dictionary service could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ContractViolationError(TypeError):
    """The dictionary service answered successfully with a body that breaks its contract.

    A TypeError subclass: a null body where a list was promised is the
    null-dereference class of failure.
    """


def _read_json(response: httpx.Response) -> Any:
    """Decode a response body; an empty body decodes to None."""
    if not response.content.strip():
        return None
    try:
        return json.loads(response.content)
    except ValueError as e:  # JSONDecodeError or UnicodeDecodeError
        raise ContractViolationError(f"Undecodable body from {response.request.url}: {e}") from e


def path_segment(value: str) -> str:
    """Percent-encode a value as one path segment.

    Dots are encoded too, so "." and ".." are not collapsed as dot segments.
    """
    return quote(value, safe="").replace(".", "%2E")


def decode_optional_entry(response: httpx.Response) -> Entry | None:
    """
    Decode a single-entry body.

    An empty or JSON null body means "not found" and decodes to None.
    """
    data = _read_json(response)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ContractViolationError(f"Expected an entry object, got {type(data).__name__}")
    try:
        return Entry.from_dict(data)
    except TypeError as e:
        raise ContractViolationError(str(e)) from e


def decode_entry_list(response: httpx.Response) -> list[Entry]:
    """
    Decode a list-of-entries body.

    An absent or JSON null body is an upstream bug, not "no results", and
    raises ContractViolationError instead of decoding to an empty list.
    """
    data = _read_json(response)
    if data is None:
        raise ContractViolationError(
            f"Null body from {response.request.url} where a list was expected"
        )
    if not isinstance(data, list):
        raise ContractViolationError(f"Expected an entry list, got {type(data).__name__}")
    entries = []
    for item in data:
        if not isinstance(item, dict):
            raise ContractViolationError(f"Expected an entry object, got {type(item).__name__}")
        try:
            entries.append(Entry.from_dict(item))
        except TypeError as e:
            raise ContractViolationError(str(e)) from e
    return entries


class AggregatorClient:
    """Calls the dictionary service's endpoints and decodes their results."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Dictionary service root. Defaults to settings.dictionary_service_url
            timeout: Per-request timeout in seconds. Defaults to settings.request_timeout
            http_client: Shared client to borrow. When omitted, each call opens
                a short-lived client.
        """
        self.base_url = (base_url or settings.dictionary_service_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._http_client = http_client

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _send(self, client: httpx.AsyncClient, url: str) -> httpx.Response:
        try:
            return await client.get(url)
        except httpx.HTTPError as e:
            logger.warning(f"Dictionary service request to {url} failed: {e}")
            raise DictionaryTransportError(f"Request to {url} failed: {e}") from e

    async def _get(self, path: str) -> httpx.Response:
        """Issue one GET against the dictionary service. No retries."""
        url = self.url_for(path)
        if self._http_client is not None:
            return await self._send(self._http_client, url)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await self._send(client, url)
            # Read the body before the client closes
            await response.aread()
            return response

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        if not response.is_success:
            url = response.request.url
            logger.warning(f"Dictionary service returned {response.status_code} for {url}")
            raise DictionaryTransportError(
                f"Dictionary service returned {response.status_code} for {url}",
                status_code=response.status_code,
            )

    async def _get_entry_list(self, path: str) -> list[Entry]:
        response = await self._get(path)
        self._raise_for_status(response)
        return decode_entry_list(response)

    async def get_definition_for(self, word: str) -> Entry | None:
        """
        Look up a word.

        Returns:
            The entry, or None when the dictionary service does not know the
            word (404, empty body, or null body)

        Raises:
            DictionaryTransportError: If the call itself fails
        """
        response = await self._get(f"/getWord/{path_segment(word)}")
        if response.status_code == httpx.codes.NOT_FOUND:
            logger.debug(f"Dictionary service does not know '{word}'")
            return None
        self._raise_for_status(response)
        return decode_optional_entry(response)

    async def get_words_starting_with(self, prefix: str) -> list[Entry]:
        return await self._get_entry_list(f"/getWordsStartingWith/{path_segment(prefix)}")

    async def get_words_that_contain(self, substring: str) -> list[Entry]:
        return await self._get_entry_list(f"/getWordsThatContain/{path_segment(substring)}")

    async def get_words_ending_with(self, suffix: str) -> list[Entry]:
        return await self._get_entry_list(f"/getWordsEndingWith/{path_segment(suffix)}")

    async def get_words_that_contain_consecutive_letters(self) -> list[Entry]:
        return await self._get_entry_list("/getWordsThatContainConsecutiveLetters")
