"""
Publication Assistant Backend - Organisation Unit Services
===========================================================

What:  Controller logic for faculties, institutes and divisions.
How:   Shared CRUD from ResourceService; institutes and divisions add
       parent resolution and listings scoped to their parent.

Parent resolution (add and update):
    ┌──────────┐    ┌──────────────────┐    ┌───────────┐    ┌────────┐
    │   DTO    │───▶│ look up parent   │───▶│ attach id │───▶│ insert │
    └──────────┘    │ by DTO parent id │    └───────────┘    │ commit │
                    └──────────────────┘                     └────────┘
                             │ missing
                             ▼
                    PreconditionFailedError (412), nothing staged
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from pubassist.exceptions import PreconditionFailedError
from pubassist.mappers import (
    division_from_dto,
    division_to_dto,
    faculty_from_dto,
    faculty_to_dto,
    institute_from_dto,
    institute_to_dto,
)
from pubassist.models import Division, Faculty, Institute
from pubassist.repositories import (
    DivisionRepository,
    FacultyRepository,
    InstituteRepository,
)
from pubassist.schemas import DivisionDTO, FacultyDTO, InstituteDTO
from pubassist.services.base import ResourceService


class FacultyService(ResourceService[Faculty, FacultyDTO]):
    resource = "faculty"
    repository_class = FacultyRepository

    to_dto = staticmethod(faculty_to_dto)
    from_dto = staticmethod(faculty_from_dto)


class InstituteService(ResourceService[Institute, InstituteDTO]):
    resource = "institute"
    repository_class = InstituteRepository

    to_dto = staticmethod(institute_to_dto)
    from_dto = staticmethod(institute_from_dto)

    async def attach_parents(self, db: AsyncSession, entity: Institute, dto: InstituteDTO) -> None:
        faculty = await FacultyRepository(db).get_by_id(dto.faculty_id)
        if faculty is None:
            raise PreconditionFailedError(parent="faculty", parent_id=dto.faculty_id)
        entity.faculty_id = faculty.id

    async def get_institutes_in_faculty(self, db: AsyncSession, faculty_id: int) -> List[InstituteDTO]:
        return await self._get_many_by(db, Institute.faculty_id, faculty_id)


class DivisionService(ResourceService[Division, DivisionDTO]):
    resource = "division"
    repository_class = DivisionRepository

    to_dto = staticmethod(division_to_dto)
    from_dto = staticmethod(division_from_dto)

    async def attach_parents(self, db: AsyncSession, entity: Division, dto: DivisionDTO) -> None:
        institute = await InstituteRepository(db).get_by_id(dto.institute_id)
        if institute is None:
            raise PreconditionFailedError(parent="institute", parent_id=dto.institute_id)
        entity.institute_id = institute.id

    async def get_divisions_in_institute(self, db: AsyncSession, institute_id: int) -> List[DivisionDTO]:
        entities = await self.repository(db).get(
            Division.institute_id == institute_id,
            Division.id,
            Division.institute,
        )
        return self._map(entities)


faculty_service = FacultyService()
institute_service = InstituteService()
division_service = DivisionService()
