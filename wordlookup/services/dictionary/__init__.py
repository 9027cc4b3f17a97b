"""Dictionary service: the word store and the matching engine behind it."""

from wordlookup.services.dictionary.loader import (
    SeedFileError,
    import_entries,
    load_word_store,
    read_seed_file,
)
from wordlookup.services.dictionary.matcher import (
    Exact,
    HasConsecutiveDoubleLetter,
    MatchEngine,
    NotFound,
    Prefix,
    Query,
    Substring,
    Suffix,
)
from wordlookup.services.dictionary.service import DictionaryService, WordNotFoundError
from wordlookup.services.dictionary.store import Entry, WordStore

__all__ = [
    "DictionaryService",
    "Entry",
    "Exact",
    "HasConsecutiveDoubleLetter",
    "MatchEngine",
    "NotFound",
    "Prefix",
    "Query",
    "SeedFileError",
    "Substring",
    "Suffix",
    "WordNotFoundError",
    "WordStore",
    "import_entries",
    "load_word_store",
    "read_seed_file",
]
