"""Dictionary service routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from wordlookup.services.dictionary import DictionaryService, Entry, WordNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dictionary"])


def get_dictionary_service(request: Request) -> DictionaryService:
    """Get the service built at startup, for dependency injection."""
    service: DictionaryService = request.app.state.dictionary_service
    return service


def _entries(entries: list[Entry]) -> list[dict[str, str]]:
    return [entry.to_dict() for entry in entries]


# ":path" lets an empty word ("/getWord/") and encoded slashes reach the handler
@router.get("/getWord/{word:path}")
async def get_word(
    word: str,
    service: DictionaryService = Depends(get_dictionary_service),
) -> dict[str, str]:
    """Exact lookup; 404 when the word is unknown."""
    try:
        return service.get_word(word).to_dict()
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/entryByWord/{word:path}")
async def entry_by_word(
    word: str,
    service: DictionaryService = Depends(get_dictionary_service),
) -> dict[str, str]:
    """Exact lookup under its alternate name."""
    try:
        return service.entry_by_word(word).to_dict()
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


@router.get("/getWordsStartingWith/{prefix:path}")
async def get_words_starting_with(
    prefix: str,
    service: DictionaryService = Depends(get_dictionary_service),
) -> list[dict[str, str]]:
    return _entries(service.get_words_starting_with(prefix))


@router.get("/getWordsThatContain/{substring:path}")
async def get_words_that_contain(
    substring: str,
    service: DictionaryService = Depends(get_dictionary_service),
) -> list[dict[str, str]]:
    return _entries(service.get_words_that_contain(substring))


@router.get("/getWordsEndingWith/{suffix:path}")
async def get_words_ending_with(
    suffix: str,
    service: DictionaryService = Depends(get_dictionary_service),
) -> list[dict[str, str]]:
    return _entries(service.get_words_ending_with(suffix))


@router.get("/getWordsThatContainConsecutiveLetters")
async def get_words_that_contain_consecutive_letters(
    service: DictionaryService = Depends(get_dictionary_service),
) -> list[dict[str, str]]:
    return _entries(service.get_words_with_consecutive_double_letters())
