"""
Publication Assistant Backend - Journal Service
================================================

What:  Journal controller logic: the shared CRUD operations plus lookups by
       print ISSN and electronic ISSN.
Who:   Called by the /api/Journals route handlers.

Alternate keys:
    ISSN is indexed but not unique in the store. Lookups return the first
    match by id and raise NotFoundError when there is none.
"""

import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from pubassist.exceptions import NotFoundError
from pubassist.mappers import journal_from_dto, journal_to_dto
from pubassist.models import Journal
from pubassist.repositories import JournalRepository
from pubassist.schemas import JournalDTO
from pubassist.services.base import ResourceService

logger = logging.getLogger(__name__)


class JournalService(ResourceService[Journal, JournalDTO]):
    resource = "journal"
    repository_class = JournalRepository
    search_field = "title"

    to_dto = staticmethod(journal_to_dto)
    from_dto = staticmethod(journal_from_dto)

    async def _get_by_key(self, db: AsyncSession, column: Any, value: str, key: str) -> JournalDTO:
        matches = await self.repository(db).get(column == value, Journal.id)
        if not matches:
            raise NotFoundError(resource=self.resource, resource_id=value, key=key)
        if len(matches) > 1:
            logger.warning("%d journals share %s %s; returning the first", len(matches), key, value)
        return self.to_dto(matches[0])

    async def get_by_issn(self, db: AsyncSession, issn: str) -> JournalDTO:
        return await self._get_by_key(db, Journal.issn, issn, "ISSN")

    async def get_by_eissn(self, db: AsyncSession, eissn: Optional[str]) -> JournalDTO:
        return await self._get_by_key(db, Journal.eissn, eissn, "eISSN")


journal_service = JournalService()
