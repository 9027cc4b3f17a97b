"""Aggregator service routes."""

from fastapi import APIRouter, Depends, Request

from wordlookup.services.aggregator import AggregatorService
from wordlookup.services.dictionary import Entry

router = APIRouter(tags=["aggregator"])


def get_aggregator_service(request: Request) -> AggregatorService:
    """Get the service built at startup, for dependency injection."""
    service: AggregatorService = request.app.state.aggregator_service
    return service


def _entries(entries: list[Entry]) -> list[dict[str, str]]:
    return [entry.to_dict() for entry in entries]


@router.get("/getDefinitionFor/{word:path}")
async def get_definition_for(
    word: str,
    service: AggregatorService = Depends(get_aggregator_service),
) -> dict[str, str] | None:
    """Look up a word; an unknown word is a null body, not an error."""
    entry = await service.get_definition_for(word)
    return entry.to_dict() if entry is not None else None


@router.get("/getWordsStartingWith/{prefix:path}")
async def get_words_starting_with(
    prefix: str,
    service: AggregatorService = Depends(get_aggregator_service),
) -> list[dict[str, str]]:
    return _entries(await service.get_words_starting_with(prefix))


@router.get("/getWordsThatContain/{substring:path}")
async def get_words_that_contain(
    substring: str,
    service: AggregatorService = Depends(get_aggregator_service),
) -> list[dict[str, str]]:
    return _entries(await service.get_words_that_contain(substring))


@router.get("/getWordsEndingWith/{suffix:path}")
async def get_words_ending_with(
    suffix: str,
    service: AggregatorService = Depends(get_aggregator_service),
) -> list[dict[str, str]]:
    return _entries(await service.get_words_ending_with(suffix))


@router.get("/getWordsThatContainConsecutiveLetters")
async def get_words_that_contain_consecutive_letters(
    service: AggregatorService = Depends(get_aggregator_service),
) -> list[dict[str, str]]:
    return _entries(await service.get_words_that_contain_consecutive_letters())
