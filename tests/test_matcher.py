"""Tests for the match engine."""

import pytest

from wordlookup.services.dictionary import (
    Entry,
    Exact,
    HasConsecutiveDoubleLetter,
    MatchEngine,
    NotFound,
    Prefix,
    Substring,
    Suffix,
    WordStore,
)
from wordlookup.services.dictionary.matcher import has_consecutive_double_letter


@pytest.fixture
def engine(word_store: WordStore) -> MatchEngine:
    return MatchEngine(word_store)


@pytest.fixture
def empty_engine() -> MatchEngine:
    return MatchEngine(WordStore())


def words(entries: list[Entry]) -> list[str]:
    return [e.word for e in entries]


class TestLookupExact:
    """Tests for MatchEngine.lookup_exact."""

    def test_present_word(self, engine):
        """Should return the entry for a stored word."""
        assert engine.lookup_exact("test") == Entry("test", "trial")

    def test_every_stored_word(self, engine, sample_entries):
        """Should find each stored word."""
        for entry in sample_entries:
            assert engine.lookup_exact(entry.word) == entry

    def test_absent_word(self, engine):
        """Should raise NotFound for an unknown word."""
        with pytest.raises(NotFound) as exc_info:
            engine.lookup_exact("nonexistent")
        assert exc_info.value.word == "nonexistent"

    def test_no_case_folding(self, engine):
        """Should treat differently-cased words as absent."""
        with pytest.raises(NotFound):
            engine.lookup_exact("TEST")

    def test_no_partial_match(self, engine):
        """Should not match a prefix of a stored word."""
        with pytest.raises(NotFound):
            engine.lookup_exact("tes")

    def test_empty_string_key_present(self):
        """Should return the entry stored under the empty string."""
        engine = MatchEngine(WordStore([Entry("", "empty")]))
        assert engine.lookup_exact("") == Entry("", "empty")

    def test_empty_string_key_absent(self, engine):
        """Should raise NotFound for the empty string when not stored."""
        with pytest.raises(NotFound):
            engine.lookup_exact("")

    def test_empty_definition_is_present(self):
        """Should distinguish a present word with an empty definition from absence."""
        engine = MatchEngine(WordStore([Entry("blank", "")]))
        assert engine.lookup_exact("blank") == Entry("blank", "")


class TestMatchPrefix:
    """Tests for MatchEngine.match_prefix."""

    def test_matches(self, engine):
        """Should return words starting with the prefix."""
        assert words(engine.match_prefix("app")) == ["apple", "app"]

    def test_iff_startswith(self, engine, sample_entries):
        """Should include an entry exactly when its word starts with the prefix."""
        for prefix in ["a", "te", "test", "x", "walk", "b"]:
            result = engine.match_prefix(prefix)
            assert result == [e for e in sample_entries if e.word.startswith(prefix)]

    def test_single_character(self, engine):
        """Should handle a one-character prefix."""
        assert words(engine.match_prefix("d")) == ["deer"]

    def test_empty_prefix_matches_all(self, engine, sample_entries):
        """Should return every entry for the empty prefix."""
        assert engine.match_prefix("") == sample_entries

    def test_no_matches(self, engine):
        """Should return an empty list when nothing matches."""
        assert engine.match_prefix("xyz") == []

    def test_longer_than_any_word(self, engine):
        """Should return an empty list for an over-long prefix."""
        assert engine.match_prefix("applesauce-and-more") == []

    def test_empty_store(self, empty_engine):
        """Should return an empty list on an empty store."""
        assert empty_engine.match_prefix("a") == []


class TestMatchSuffix:
    """Tests for MatchEngine.match_suffix."""

    def test_matches(self, engine):
        """Should return words ending with the suffix."""
        assert words(engine.match_suffix("ing")) == ["testing", "running", "walking"]

    def test_iff_endswith(self, engine, sample_entries):
        """Should include an entry exactly when its word ends with the suffix."""
        for suffix in ["g", "er", "k", "pp", "zz"]:
            result = engine.match_suffix(suffix)
            assert result == [e for e in sample_entries if e.word.endswith(suffix)]

    def test_no_matches(self, engine):
        """Should return an empty list when nothing matches."""
        assert engine.match_suffix("xyz") == []

    def test_empty_store(self, empty_engine):
        """Should return an empty list on an empty store."""
        assert empty_engine.match_suffix("ing") == []


class TestMatchSubstring:
    """Tests for MatchEngine.match_substring."""

    def test_matches(self, engine):
        """Should return words containing the substring."""
        assert words(engine.match_substring("est")) == ["test", "testing"]

    def test_includes_prefix_and_suffix_matches(self, engine):
        """Should be a superset of prefix and suffix matches."""
        substring_matches = engine.match_substring("ing")
        for entry in engine.match_suffix("ing"):
            assert entry in substring_matches
        substring_matches = engine.match_substring("app")
        for entry in engine.match_prefix("app"):
            assert entry in substring_matches

    def test_iff_contains(self, engine, sample_entries):
        """Should include an entry exactly when its word contains the substring."""
        for substring in ["e", "nn", "oo", "alk", "q"]:
            result = engine.match_substring(substring)
            assert result == [e for e in sample_entries if substring in e.word]

    def test_no_duplicates(self, engine):
        """Should return each entry once even if the substring occurs twice."""
        assert words(engine.match_substring("t")) == ["test", "testing"]

    def test_no_matches(self, engine):
        """Should return an empty list when nothing matches."""
        assert engine.match_substring("xyz") == []

    def test_empty_store(self, empty_engine):
        """Should return an empty list on an empty store."""
        assert empty_engine.match_substring("a") == []


class TestMatchConsecutiveDoubleLetters:
    """Tests for MatchEngine.match_consecutive_double_letters."""

    def test_matches(self, engine):
        """Should return words with an adjacent equal pair anywhere."""
        assert words(engine.match_consecutive_double_letters()) == [
            "apple",
            "app",
            "book",
            "deer",
            "running",
        ]

    def test_excludes_words_without_pairs(self, engine):
        """Should not return words whose repeated letters are not adjacent."""
        result = words(engine.match_consecutive_double_letters())
        assert "test" not in result
        assert "testing" not in result
        assert "walking" not in result

    def test_pair_at_end_of_word(self):
        """Should find a pair in the last two characters."""
        engine = MatchEngine(WordStore([Entry("mississippi", "river"), Entry("jazz", "music")]))
        assert words(engine.match_consecutive_double_letters()) == ["mississippi", "jazz"]

    def test_no_matches(self):
        """Should return an empty list when no word has a pair."""
        engine = MatchEngine(WordStore([Entry("test", "trial"), Entry("a", "letter")]))
        assert engine.match_consecutive_double_letters() == []

    def test_empty_store(self, empty_engine):
        """Should return an empty list on an empty store."""
        assert empty_engine.match_consecutive_double_letters() == []

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("book", True),
            ("deer", True),
            ("aa", True),
            ("abcdd", True),
            ("test", False),
            ("a", False),
            ("", False),
            ("Aa", False),
        ],
    )
    def test_has_consecutive_double_letter(self, word, expected):
        """Should detect any equal adjacent pair, case-sensitively."""
        assert has_consecutive_double_letter(word) is expected


class TestRun:
    """Tests for MatchEngine.run query dispatch."""

    def test_exact(self, engine):
        """Should dispatch Exact to lookup_exact."""
        assert engine.run(Exact("book")) == Entry("book", "bound pages")

    def test_exact_not_found(self, engine):
        """Should propagate NotFound."""
        with pytest.raises(NotFound):
            engine.run(Exact("missing"))

    def test_patterns(self, engine):
        """Should dispatch each pattern variant to its matcher."""
        assert engine.run(Prefix("app")) == engine.match_prefix("app")
        assert engine.run(Suffix("ing")) == engine.match_suffix("ing")
        assert engine.run(Substring("est")) == engine.match_substring("est")
        assert engine.run(HasConsecutiveDoubleLetter()) == (
            engine.match_consecutive_double_letters()
        )

    def test_unsupported_query(self, engine):
        """Should reject objects that are not query variants."""
        with pytest.raises(TypeError):
            engine.run("book")  # type: ignore[arg-type]
