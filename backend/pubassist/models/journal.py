"""
Publication Assistant Backend - Journal SQLAlchemy Model
=========================================================

What:  ORM model for the `journals` table.
Who:   Used by JournalRepository and by Alembic for schema management.

Table Design:
    - Integer autoincrement primary key assigned by the store on insert
    - issn: print ISSN, required; indexed for the /ISSN/{issn} lookup.
      Not unique-constrained: lookups return the first match.
    - eissn: electronic ISSN, optional
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pubassist.database import Base


class Journal(Base):
    """A journal in which publications appear."""

    __tablename__ = "journals"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    title: Mapped[str] = mapped_column(
        String(300),
        nullable=False,
        comment="Full journal title",
    )

    issn: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="Print ISSN",
    )

    eissn: Mapped[Optional[str]] = mapped_column(
        String(20),
        nullable=True,
        index=True,
        comment="Electronic ISSN",
    )

    def __repr__(self) -> str:
        return f"<Journal(id={self.id}, issn='{self.issn}', title='{self.title}')>"
