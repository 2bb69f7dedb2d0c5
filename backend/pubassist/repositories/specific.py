"""Repositories bound to each entity type."""

from pubassist.models import Division, Faculty, Institute, Journal
from pubassist.repositories.base import Repository


class JournalRepository(Repository[Journal]):
    model = Journal


class FacultyRepository(Repository[Faculty]):
    model = Faculty


class InstituteRepository(Repository[Institute]):
    model = Institute


class DivisionRepository(Repository[Division]):
    model = Division
