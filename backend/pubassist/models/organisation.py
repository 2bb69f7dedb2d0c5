"""
Publication Assistant Backend - Organisation Unit Models
=========================================================

What:  ORM models for the university hierarchy: faculties, institutes
       and divisions.
Who:   Used by the organisation repositories and by Alembic.

Hierarchy:
    Faculty 1 ── * Institute 1 ── * Division

    Both foreign keys are NOT NULL: a division cannot exist without its
    institute, nor an institute without its faculty. Services resolve the
    parent before inserting and answer 412 when it is missing.
"""

from typing import List

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from pubassist.database import Base


class Faculty(Base):
    __tablename__ = "faculties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    institutes: Mapped[List["Institute"]] = relationship(
        back_populates="faculty",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Faculty(id={self.id}, name='{self.name}')>"


class Institute(Base):
    __tablename__ = "institutes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    faculty_id: Mapped[int] = mapped_column(
        ForeignKey("faculties.id"),
        nullable=False,
        index=True,
    )

    # lazy="raise": related rows must be requested as includes on the
    # repository query; implicit lazy loads are not possible under asyncio
    faculty: Mapped[Faculty] = relationship(back_populates="institutes", lazy="raise")
    divisions: Mapped[List["Division"]] = relationship(
        back_populates="institute",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Institute(id={self.id}, name='{self.name}', faculty_id={self.faculty_id})>"


class Division(Base):
    __tablename__ = "divisions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    institute_id: Mapped[int] = mapped_column(
        ForeignKey("institutes.id"),
        nullable=False,
        index=True,
    )

    institute: Mapped[Institute] = relationship(back_populates="divisions", lazy="raise")

    def __repr__(self) -> str:
        return f"<Division(id={self.id}, name='{self.name}', institute_id={self.institute_id})>"
