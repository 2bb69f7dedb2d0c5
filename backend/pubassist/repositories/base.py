"""
Publication Assistant Backend - Generic Repository
===================================================

What:  Data-access abstraction parametrized by entity type.
How:   `Repository[ModelT]` wraps an AsyncSession and one mapped class.
       Concrete repositories only bind `model`; queries are expressed as
       SQLAlchemy predicates passed in by the caller.
Who:   Constructed per request by the services with the request's session.

Contract:
    get(filter, order_by, *includes)  → list of entities
    get_by_id(id)                     → entity or None
    insert(entity)                    → stages row, store assigns the id
    update(entity)                    → stages the full state of a stored row
    delete(entity | id)               → removes row; unknown id is a no-op

    The repository never commits. Callers batch their mutations and call
    `session.commit()` themselves. Store errors (IntegrityError, connection
    loss) propagate unchanged.
"""

import logging
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar, Union

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import ColumnElement

from pubassist.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

Filter = Union[ColumnElement[bool], Sequence[ColumnElement[bool]], None]
Ordering = Union[Any, Sequence[Any], None]


class Repository(Generic[ModelT]):
    """
    Generic CRUD repository over a single mapped class.

    Subclasses set `model`:

        class JournalRepository(Repository[Journal]):
            model = Journal

    Example:
        repo = JournalRepository(session)
        sci = await repo.get(Journal.title.contains("Sci"), Journal.title)
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(
        self,
        filter: Filter = None,
        order_by: Ordering = None,
        *includes: Any,
    ) -> List[ModelT]:
        """
        Return all entities matching `filter`, ordered by `order_by`.

        Args:
            filter:   A boolean SQL expression, a sequence of them (ANDed),
                      or None for every row.
            order_by: A column / ordering expression or a sequence of them.
            includes: Relationship attributes to eager-load, e.g.
                      `Division.institute`.
        """
        stmt = select(self.model)

        if filter is not None:
            criteria = filter if isinstance(filter, (list, tuple)) else (filter,)
            stmt = stmt.where(*criteria)

        if order_by is not None:
            ordering = order_by if isinstance(order_by, (list, tuple)) else (order_by,)
            stmt = stmt.order_by(*ordering)

        for relationship in includes:
            stmt = stmt.options(selectinload(relationship))

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        return await self.session.get(self.model, entity_id)

    async def insert(self, entity: ModelT) -> None:
        """Stage a new row; the flush makes the store assign its identifier."""
        self.session.add(entity)
        await self.session.flush()
        logger.debug("Inserted %r", entity)

    async def update(self, entity: ModelT) -> None:
        """
        Stage the state of `entity` over the stored row with the same id.

        Every attribute set on `entity` overwrites the stored value. The
        mappers set every column, so an entity built from a DTO replaces
        the row completely.
        """
        await self.session.merge(entity)
        await self.session.flush()
        logger.debug("Updated %r", entity)

    async def delete(self, entity_or_id: Union[ModelT, Any]) -> None:
        """Remove an entity, given the entity itself or its identifier."""
        if isinstance(entity_or_id, self.model):
            entity: Optional[ModelT] = entity_or_id
            # Entities built from a request body are not attached to the session
            if not inspect(entity).persistent:
                entity_id = entity.id
                entity = None if entity_id is None else await self.get_by_id(entity_id)
        else:
            entity = await self.get_by_id(entity_or_id)

        if entity is None:
            logger.debug("Delete of missing %s %s ignored", self.model.__name__, entity_or_id)
            return

        await self.session.delete(entity)
        await self.session.flush()
        logger.debug("Deleted %r", entity)
