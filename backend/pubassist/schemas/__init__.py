# Schemas package init
"""
Pydantic transfer objects (DTOs) defining the API contract.

Schemas are kept separate from the SQLAlchemy models: the wire shape
flattens relationships to identifiers and never exposes ORM state.
"""

from pubassist.schemas.journal import JournalDTO, JournalPostDTO
from pubassist.schemas.organisation import DivisionDTO, FacultyDTO, InstituteDTO

__all__ = [
    "JournalDTO",
    "JournalPostDTO",
    "FacultyDTO",
    "InstituteDTO",
    "DivisionDTO",
]
