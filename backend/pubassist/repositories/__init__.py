# Repositories package init
"""
Data access layer: one generic repository, bound once per entity type.
"""

from pubassist.repositories.base import Repository
from pubassist.repositories.specific import (
    DivisionRepository,
    FacultyRepository,
    InstituteRepository,
    JournalRepository,
)

__all__ = [
    "Repository",
    "JournalRepository",
    "FacultyRepository",
    "InstituteRepository",
    "DivisionRepository",
]
