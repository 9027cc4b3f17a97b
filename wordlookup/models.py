"""SQLAlchemy ORM models."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from wordlookup.database import Base


class EntryRecord(Base):
    """Persisted word/definition pair the dictionary store is built from."""

    __tablename__ = "entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    word: Mapped[str] = mapped_column(Text, unique=True, index=True)
    definition: Mapped[str] = mapped_column(Text, default="")

    def __repr__(self) -> str:
        return f"EntryRecord(word={self.word!r})"
