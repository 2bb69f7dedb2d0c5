"""
Publication Assistant Backend - Entity ⇄ DTO Mapping
=====================================================

What:  Pure functions projecting ORM entities to transfer objects and back.
How:   Each call builds a fresh object; nothing is shared or mutated.

Rules:
    - *_to_dto reads column attributes only (never relationships), so it
      is safe on entities loaded without includes.
    - *_from_dto sets every column, including `id` (None on create), and
      never resolves foreign keys. Relationship-bearing entities get their
      parent id from the caller after the parent has been looked up.
    - The pair is not symmetric: generated identifiers and relationship
      objects are not reconstructed.
"""

from pubassist.models import Division, Faculty, Institute, Journal
from pubassist.schemas import (
    DivisionDTO,
    FacultyDTO,
    InstituteDTO,
    JournalDTO,
    JournalPostDTO,
)


# ── Journals ──────────────────────────────────────────────────────────────

def journal_to_dto(journal: Journal) -> JournalDTO:
    return JournalDTO(
        id=journal.id,
        title=journal.title,
        issn=journal.issn,
        eissn=journal.eissn,
    )


def journal_from_dto(dto: JournalPostDTO) -> Journal:
    """Build a Journal; `id` is copied only from a full JournalDTO."""
    return Journal(
        id=getattr(dto, "id", None),
        title=dto.title,
        issn=dto.issn,
        eissn=dto.eissn,
    )


# ── Faculties ─────────────────────────────────────────────────────────────

def faculty_to_dto(faculty: Faculty) -> FacultyDTO:
    return FacultyDTO(id=faculty.id, name=faculty.name)


def faculty_from_dto(dto: FacultyDTO) -> Faculty:
    return Faculty(id=dto.id, name=dto.name)


# ── Institutes ────────────────────────────────────────────────────────────

def institute_to_dto(institute: Institute) -> InstituteDTO:
    return InstituteDTO(
        id=institute.id,
        name=institute.name,
        faculty_id=institute.faculty_id,
    )


def institute_from_dto(dto: InstituteDTO) -> Institute:
    """Build an Institute without its faculty; the caller attaches it."""
    return Institute(id=dto.id, name=dto.name)


# ── Divisions ─────────────────────────────────────────────────────────────

def division_to_dto(division: Division) -> DivisionDTO:
    return DivisionDTO(
        id=division.id,
        name=division.name,
        institute_id=division.institute_id,
    )


def division_from_dto(dto: DivisionDTO) -> Division:
    """Build a Division without its institute; the caller attaches it."""
    return Division(id=dto.id, name=dto.name)
