"""Word matching over a WordStore: exact lookup and pattern queries."""

from collections.abc import Callable
from dataclasses import dataclass

from wordlookup.services.dictionary.store import Entry, WordStore


class NotFound(LookupError):
    """Raised by exact lookup when the word is not in the store."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Word not found: {word!r}")
        self.word = word


@dataclass(frozen=True)
class Exact:
    word: str


@dataclass(frozen=True)
class Prefix:
    prefix: str


@dataclass(frozen=True)
class Suffix:
    suffix: str


@dataclass(frozen=True)
class Substring:
    substring: str


@dataclass(frozen=True)
class HasConsecutiveDoubleLetter:
    pass


Query = Exact | Prefix | Suffix | Substring | HasConsecutiveDoubleLetter


def has_consecutive_double_letter(word: str) -> bool:
    """Check whether any two adjacent characters in the word are equal."""
    return any(a == b for a, b in zip(word, word[1:]))


class MatchEngine:
    """
    Pure query evaluation over a WordStore.

    Pattern queries return entries in store order. They never fail: an empty
    store or a pattern with no matches gives an empty list.
    """

    def __init__(self, store: WordStore) -> None:
        self.store = store

    def _select(self, predicate: Callable[[str], bool]) -> list[Entry]:
        return [entry for entry in self.store.entries() if predicate(entry.word)]

    def lookup_exact(self, word: str) -> Entry:
        """
        Return the entry stored under exactly this word.

        Raises:
            NotFound: If no entry has this word as its key
        """
        try:
            return self.store[word]
        except KeyError:
            raise NotFound(word) from None

    def match_prefix(self, prefix: str) -> list[Entry]:
        """Entries whose word starts with the prefix (all entries for "")."""
        return self._select(lambda word: word.startswith(prefix))

    def match_suffix(self, suffix: str) -> list[Entry]:
        """Entries whose word ends with the suffix."""
        return self._select(lambda word: word.endswith(suffix))

    def match_substring(self, substring: str) -> list[Entry]:
        """Entries whose word contains the substring anywhere."""
        return self._select(lambda word: substring in word)

    def match_consecutive_double_letters(self) -> list[Entry]:
        """Entries whose word has at least one pair of equal adjacent characters."""
        return self._select(has_consecutive_double_letter)

    def run(self, query: Query) -> Entry | list[Entry]:
        """Evaluate a query variant."""
        if isinstance(query, Exact):
            return self.lookup_exact(query.word)
        if isinstance(query, Prefix):
            return self.match_prefix(query.prefix)
        if isinstance(query, Suffix):
            return self.match_suffix(query.suffix)
        if isinstance(query, Substring):
            return self.match_substring(query.substring)
        if isinstance(query, HasConsecutiveDoubleLetter):
            return self.match_consecutive_double_letters()
        raise TypeError(f"Unsupported query: {query!r}")
