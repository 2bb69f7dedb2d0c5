"""
Publication Assistant Backend - Resource Service Base
======================================================

What:  The operations every resource controller shares: list, fetch by id,
       substring search, add, update, delete.
How:   A service is stateless. Each call receives the request's
       AsyncSession, builds the repository for it, performs the operation,
       commits when it mutated anything, and maps entities to DTOs.
Who:   Subclassed once per resource; the subclasses add alternate-key
       lookups and parent resolution.

Operation shapes:
    get_all()            → list of DTOs (empty when the table is empty)
    get_by_id(id)        → DTO, or NotFoundError
    search(text)         → DTOs whose text field contains `text`
    add(dto)             → InvalidArgumentError if dto is None; insert + commit
    update(dto)          → InvalidArgumentError if dto or dto.id is None;
                           NotFoundError if the id is not stored;
                           full-state replacement + commit
    delete(id)           → idempotent; missing rows are not an error
"""

import logging
from typing import Any, Callable, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from pubassist.exceptions import InvalidArgumentError, NotFoundError
from pubassist.repositories.base import ModelT, Repository

logger = logging.getLogger(__name__)

DTOT = TypeVar("DTOT", bound=BaseModel)


class ResourceService(Generic[ModelT, DTOT]):
    """
    Shared controller logic for one entity type.

    Subclasses declare:
        resource:          Name used in error messages and logs
        repository_class:  Repository bound to the entity
        search_field:      Name of the text column searched by `search`
        to_dto / from_dto: Mapping functions from pubassist.mappers,
                           wrapped in staticmethod()
    """

    resource: str
    repository_class: Type[Repository[ModelT]]
    search_field: str = "name"

    to_dto: Callable[[ModelT], DTOT]
    from_dto: Callable[[Any], ModelT]

    def repository(self, db: AsyncSession) -> Repository[ModelT]:
        return self.repository_class(db)

    @property
    def model(self) -> Type[ModelT]:
        return self.repository_class.model

    def _map(self, entities: List[ModelT]) -> List[DTOT]:
        return [self.to_dto(entity) for entity in entities]

    # ── Reads ─────────────────────────────────────────────────────────────

    async def get_all(self, db: AsyncSession) -> List[DTOT]:
        entities = await self.repository(db).get(None, self.model.id)
        return self._map(entities)

    async def get_by_id(self, db: AsyncSession, entity_id: int) -> DTOT:
        entity = await self.repository(db).get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(resource=self.resource, resource_id=entity_id)
        return self.to_dto(entity)

    async def search(self, db: AsyncSession, text: str) -> List[DTOT]:
        """Substring match; case sensitivity follows the store's collation."""
        column = getattr(self.model, self.search_field)
        entities = await self.repository(db).get(
            column.contains(text, autoescape=True),
            self.model.id,
        )
        return self._map(entities)

    async def _get_many_by(self, db: AsyncSession, column: Any, value: Any) -> List[DTOT]:
        entities = await self.repository(db).get(column == value, self.model.id)
        return self._map(entities)

    # ── Writes ────────────────────────────────────────────────────────────

    async def attach_parents(self, db: AsyncSession, entity: ModelT, dto: Any) -> None:
        """
        Resolve and attach required parent entities before persisting.

        The default has no parents. Raise PreconditionFailedError when a
        referenced parent is missing.
        """

    async def add(self, db: AsyncSession, dto: Optional[Any]) -> DTOT:
        if dto is None:
            raise InvalidArgumentError(
                message=f"A {self.resource} body is required",
                argument="item",
            )

        entity = self.from_dto(dto)
        # Identifiers are always assigned by the store on create
        entity.id = None
        await self.attach_parents(db, entity, dto)

        await self.repository(db).insert(entity)
        await db.commit()

        logger.info("Added %s %s", self.resource, entity.id)
        return self.to_dto(entity)

    async def update(self, db: AsyncSession, dto: Optional[Any]) -> DTOT:
        if dto is None:
            raise InvalidArgumentError(
                message=f"A {self.resource} body is required",
                argument="item",
            )
        if getattr(dto, "id", None) is None:
            raise InvalidArgumentError(
                message=f"An update requires the {self.resource} id",
                argument="id",
            )

        repository = self.repository(db)
        if await repository.get_by_id(dto.id) is None:
            raise NotFoundError(resource=self.resource, resource_id=dto.id)

        entity = self.from_dto(dto)
        await self.attach_parents(db, entity, dto)

        await repository.update(entity)
        await db.commit()

        logger.info("Updated %s %s", self.resource, entity.id)
        return self.to_dto(entity)

    async def delete(self, db: AsyncSession, entity_id: Optional[int]) -> None:
        if entity_id is None:
            raise InvalidArgumentError(
                message=f"A {self.resource} id is required",
                argument="id",
            )

        await self.repository(db).delete(entity_id)
        await db.commit()

        logger.info("Deleted %s %s", self.resource, entity_id)
