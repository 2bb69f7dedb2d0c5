"""
Publication Assistant Backend - Journal Route Handlers
=======================================================

What:  /api/Journals endpoints: the standard CRUD set plus alternate-key
       lookups by ISSN and eISSN.
Who:   Called by the journals views of the client.

    GET /api/Journals/ISSN/{issn}    → JournalDTO | 404
    GET /api/Journals/eISSN/{eissn}  → JournalDTO | 404
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pubassist.database import get_db_session
from pubassist.routes.resource import register_resource_routes
from pubassist.schemas import JournalDTO, JournalPostDTO
from pubassist.schemas.common import ErrorResponse
from pubassist.services.journal_service import journal_service

router = APIRouter(prefix="/api", tags=["Journals"])


@router.get(
    "/Journals/ISSN/{issn}",
    response_model=JournalDTO,
    responses={404: {"description": "No journal with this ISSN", "model": ErrorResponse}},
    summary="Get a journal by print ISSN",
)
async def get_by_issn(issn: str, db: AsyncSession = Depends(get_db_session)) -> JournalDTO:
    return await journal_service.get_by_issn(db, issn)


@router.get(
    "/Journals/eISSN/{eissn}",
    response_model=JournalDTO,
    responses={404: {"description": "No journal with this eISSN", "model": ErrorResponse}},
    summary="Get a journal by electronic ISSN",
)
async def get_by_eissn(eissn: str, db: AsyncSession = Depends(get_db_session)) -> JournalDTO:
    return await journal_service.get_by_eissn(db, eissn)


register_resource_routes(
    router,
    "Journals",
    journal_service,
    dto_class=JournalDTO,
    post_dto_class=JournalPostDTO,
)
