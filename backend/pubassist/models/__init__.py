# Models package init
"""
ORM models registered on `pubassist.database.Base`.

Importing this package registers every table with the shared metadata,
which Alembic and `create_tables()` rely on.
"""

from pubassist.models.journal import Journal
from pubassist.models.organisation import Division, Faculty, Institute

__all__ = ["Journal", "Faculty", "Institute", "Division"]
