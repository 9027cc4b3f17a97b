"""Dictionary service facade over the match engine."""

import logging

from wordlookup.services.dictionary.matcher import MatchEngine, NotFound
from wordlookup.services.dictionary.store import Entry, WordStore

logger = logging.getLogger(__name__)


class WordNotFoundError(Exception):
    """The requested word is not in the dictionary."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Word not found: {word!r}")
        self.word = word


class DictionaryService:
    """
    Request-facing dictionary operations.

    Only exact lookup has a failure mode (WordNotFoundError). Pattern
    queries always succeed, possibly with an empty list.
    """

    def __init__(self, store: WordStore) -> None:
        """
        Initialize the dictionary service.

        Args:
            store: The loaded word store, owned by the caller
        """
        self.engine = MatchEngine(store)

    @property
    def word_count(self) -> int:
        return len(self.engine.store)

    def get_word(self, word: str) -> Entry:
        """
        Look up a single word.

        Raises:
            WordNotFoundError: If the word is not in the store
        """
        try:
            return self.engine.lookup_exact(word)
        except NotFound:
            logger.debug(f"Word '{word}' not found")
            raise WordNotFoundError(word) from None

    def entry_by_word(self, word: str) -> Entry:
        """Alternate lookup entry point; same contract as get_word."""
        return self.get_word(word)

    def get_words_starting_with(self, prefix: str) -> list[Entry]:
        return self.engine.match_prefix(prefix)

    def get_words_that_contain(self, substring: str) -> list[Entry]:
        return self.engine.match_substring(substring)

    def get_words_ending_with(self, suffix: str) -> list[Entry]:
        return self.engine.match_suffix(suffix)

    def get_words_with_consecutive_double_letters(self) -> list[Entry]:
        return self.engine.match_consecutive_double_letters()
