"""
Publication Assistant Backend - Organisation Unit Route Handlers
=================================================================

What:  CRUD endpoints for faculties, institutes and divisions, plus the
       listings scoped to a parent unit.

    GET /api/Faculty/{faculty_id}/Institutes      → list of InstituteDTO
    GET /api/Institute/{institute_id}/Divisions   → list of DivisionDTO

Scoped listings return an empty list when the parent has no children or
does not exist.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pubassist.database import get_db_session
from pubassist.routes.resource import register_resource_routes
from pubassist.schemas import DivisionDTO, FacultyDTO, InstituteDTO
from pubassist.services.organisation_service import (
    division_service,
    faculty_service,
    institute_service,
)

faculties_router = APIRouter(prefix="/api", tags=["Faculties"])
institutes_router = APIRouter(prefix="/api", tags=["Institutes"])
divisions_router = APIRouter(prefix="/api", tags=["Divisions"])


@institutes_router.get(
    "/Faculty/{faculty_id}/Institutes",
    response_model=List[InstituteDTO],
    summary="List the institutes of a faculty",
)
async def get_institutes_in_faculty(
    faculty_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[InstituteDTO]:
    return await institute_service.get_institutes_in_faculty(db, faculty_id)


@divisions_router.get(
    "/Institute/{institute_id}/Divisions",
    response_model=List[DivisionDTO],
    summary="List the divisions of an institute",
)
async def get_divisions_in_institute(
    institute_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> List[DivisionDTO]:
    return await division_service.get_divisions_in_institute(db, institute_id)


register_resource_routes(faculties_router, "Faculties", faculty_service, dto_class=FacultyDTO)
register_resource_routes(institutes_router, "Institutes", institute_service, dto_class=InstituteDTO)
register_resource_routes(divisions_router, "Divisions", division_service, dto_class=DivisionDTO)
