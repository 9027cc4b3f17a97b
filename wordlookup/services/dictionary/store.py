"""Entry value type and the read-only word store."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Entry:
    """A word and its definition."""

    word: str
    definition: str

    def to_dict(self) -> dict[str, str]:
        """Wire shape: {"word": ..., "definition": ...}."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Entry":
        """Build an Entry from its wire shape.

        Raises:
            TypeError: If either field is missing or not a string
        """
        word = data.get("word")
        definition = data.get("definition")
        if not isinstance(word, str) or not isinstance(definition, str):
            raise TypeError(f"Malformed entry: {dict(data)!r}")
        return cls(word=word, definition=definition)


class WordStore(Mapping[str, Entry]):
    """
    Immutable mapping from word to Entry.

    Keys are stored exactly as given; no case folding or trimming is applied.
    Iteration follows insertion order. A word supplied more than once keeps
    its last definition.
    """

    def __init__(self, entries: Iterable[Entry] = ()) -> None:
        by_word: dict[str, Entry] = {}
        for entry in entries:
            by_word[entry.word] = entry
        self._entries = MappingProxyType(by_word)

    @classmethod
    def from_definitions(cls, definitions: Mapping[str, str]) -> "WordStore":
        """Build a store from a plain word -> definition mapping."""
        return cls(Entry(word, definition) for word, definition in definitions.items())

    def __getitem__(self, word: str) -> Entry:
        return self._entries[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"WordStore({len(self)} entries)"

    def entries(self) -> Iterator[Entry]:
        """Iterate over entries in store order."""
        return iter(self._entries.values())
