"""Seed persistence: JSON seed files and the entries table."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from wordlookup.models import EntryRecord
from wordlookup.services.dictionary.store import Entry, WordStore

logger = logging.getLogger(__name__)


class SeedFileError(Exception):
    """A seed file could not be read or has an unexpected shape."""


def parse_seed_data(data: object) -> list[Entry]:
    """
    Convert decoded seed JSON to entries.

    Accepts either a list of {"word", "definition"} objects or an object
    mapping word to definition.
    """
    if isinstance(data, dict):
        entries = []
        for word, definition in data.items():
            if not isinstance(definition, str):
                raise SeedFileError(f"Definition for '{word}' is not a string")
            entries.append(Entry(word=word, definition=definition))
        return entries

    if isinstance(data, list):
        entries = []
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise SeedFileError(f"Item {index} is not an object")
            try:
                entries.append(Entry.from_dict(item))
            except TypeError as e:
                raise SeedFileError(f"Item {index}: {e}") from e
        return entries

    raise SeedFileError(f"Expected a JSON array or object, got {type(data).__name__}")


def read_seed_file(path: Path) -> list[Entry]:
    """Read entries from a JSON seed file."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise SeedFileError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SeedFileError(f"Invalid JSON in {path}: {e}") from e

    return parse_seed_data(data)


async def count_entries(session: AsyncSession) -> int:
    result = await session.execute(select(func.count(EntryRecord.id)))
    return int(result.scalar() or 0)


async def import_entries(session: AsyncSession, entries: Iterable[Entry]) -> int:
    """
    Insert or update entries by word.

    Returns the number of entries written. The caller commits.
    """
    written = 0
    for entry in entries:
        stmt = select(EntryRecord).where(EntryRecord.word == entry.word)
        result = await session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing:
            existing.definition = entry.definition
        else:
            session.add(EntryRecord(word=entry.word, definition=entry.definition))
        written += 1

        # Flush so a repeated word in the same batch hits the update path
        await session.flush()

    return written


async def load_word_store(session: AsyncSession) -> WordStore:
    """Build a WordStore from all persisted entries, in insertion order."""
    result = await session.execute(select(EntryRecord).order_by(EntryRecord.id))
    records = result.scalars().all()
    store = WordStore(Entry(word=r.word, definition=r.definition) for r in records)
    logger.info(f"Loaded {len(store)} dictionary entries")
    return store


async def seed_if_empty(session: AsyncSession, seed_file: Path | None) -> int:
    """
    Import the seed file when the entries table is empty.

    Returns the number of entries imported (0 when skipped).
    """
    if seed_file is None:
        return 0
    if await count_entries(session) > 0:
        logger.debug("Entries table already populated, skipping seed file")
        return 0

    written = await import_entries(session, read_seed_file(seed_file))
    await session.commit()
    logger.info(f"Seeded {written} entries from {seed_file}")
    return written
