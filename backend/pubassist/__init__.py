"""
Publication Assistant Backend - Application Package Initializer
================================================================

What: Marks the `pubassist` directory as a Python package.
Who:  Imported by uvicorn (`pubassist.main:app`), Alembic and pytest.

Architecture Note:
    The backend is a layered CRUD service for publication metadata
    (journals, faculties, institutes, divisions):

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Resource Controllers)│  ← validate, resolve parents, commit
    ├─────────────────────────────────────┤
    │    Mappers (entity ⇄ DTO)           │  ← pure projections
    ├─────────────────────────────────────┤
    │    Repositories (generic per type)  │  ← get / insert / update / delete
    ├─────────────────────────────────────┤
    │    Models & Database (persistence)  │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
