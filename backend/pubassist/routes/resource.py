"""
Publication Assistant Backend - Resource Route Builder
=======================================================

What:  Registers the uniform CRUD endpoints of one resource on a router.
How:   Each handler extracts path/body data, calls the resource service
       with the request's session, and returns the DTO(s).

Endpoints registered for `/api/{Resource}`:
    GET     /api/{Resource}              → list of DTO (200)
    GET     /api/{Resource}/{id}         → DTO (200) | 404
    GET     /api/{Resource}/Like/{text}  → list of DTO (200)
    POST    /api/{Resource}              → DTO (201) | 400 | 412
    PATCH   /api/{Resource}              → DTO (200) | 400 | 404 | 412
    DELETE  /api/{Resource}/{id}         → 204 (also when the row is absent)

Bodies are declared Optional so that a missing body reaches the service
and is answered with 400 instead of FastAPI's 422.
"""

from typing import List, Optional, Type

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from pubassist.database import get_db_session
from pubassist.schemas.common import ErrorResponse
from pubassist.services.base import ResourceService

_ERRORS = {
    404: {"description": "Not found", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}
_WRITE_ERRORS = {
    400: {"description": "Missing body or identifier", "model": ErrorResponse},
    412: {"description": "Referenced parent does not exist", "model": ErrorResponse},
    500: {"description": "Server error", "model": ErrorResponse},
}


def register_resource_routes(
    router: APIRouter,
    collection: str,
    service: ResourceService,
    dto_class: Type[BaseModel],
    post_dto_class: Optional[Type[BaseModel]] = None,
) -> None:
    """
    Add the standard CRUD endpoints for `collection` to `router`.

    Args:
        router:         Router mounted under /api
        collection:     Path segment, e.g. "Journals"
        service:        Resource service implementing the operations
        dto_class:      Response body and PATCH body
        post_dto_class: POST body (defaults to dto_class)
    """
    post_dto_class = post_dto_class or dto_class
    resource = service.resource
    base = f"/{collection}"

    @router.get(
        base,
        response_model=List[dto_class],
        summary=f"List all {collection.lower()}",
        name=f"{resource}_get_all",
    )
    async def get_all(db: AsyncSession = Depends(get_db_session)):
        return await service.get_all(db)

    @router.get(
        f"{base}/{{item_id}}",
        response_model=dto_class,
        responses={404: _ERRORS[404]},
        summary=f"Get a {resource} by ID",
        name=f"{resource}_get_by_id",
    )
    async def get_by_id(item_id: int, db: AsyncSession = Depends(get_db_session)):
        return await service.get_by_id(db, item_id)

    @router.get(
        f"{base}/Like/{{text}}",
        response_model=List[dto_class],
        summary=f"Search {collection.lower()} by {service.search_field} substring",
        name=f"{resource}_search",
    )
    async def search(text: str, db: AsyncSession = Depends(get_db_session)):
        return await service.search(db, text)

    @router.post(
        base,
        response_model=dto_class,
        status_code=status.HTTP_201_CREATED,
        responses=_WRITE_ERRORS,
        summary=f"Add a {resource}",
        name=f"{resource}_add",
    )
    async def add(
        item: Optional[post_dto_class] = Body(default=None),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.add(db, item)

    @router.patch(
        base,
        response_model=dto_class,
        responses={**_WRITE_ERRORS, 404: _ERRORS[404]},
        summary=f"Update a {resource} (full state required)",
        name=f"{resource}_update",
    )
    async def update(
        item: Optional[dto_class] = Body(default=None),
        db: AsyncSession = Depends(get_db_session),
    ):
        return await service.update(db, item)

    @router.delete(
        f"{base}/{{item_id}}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        summary=f"Delete a {resource}",
        name=f"{resource}_delete",
    )
    async def delete(item_id: int, db: AsyncSession = Depends(get_db_session)) -> Response:
        await service.delete(db, item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
