"""Generic CRUD routes for registered resource collections.

The same handlers back both API generations: v1 is open, v2 requires a bearer
token whose role grants the verb being performed. Rejected v2 requests never
reach the store. Bodies are decoded by the json_body dependency, which runs after
the route guard, so an unauthenticated v2 write fails on auth even when its body
is not valid JSON.
"""

from collections.abc import Callable
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from gatekeeper.api.deps import get_registry, json_body, require_capability
from gatekeeper.core.database import get_db
from gatekeeper.services.registry import ModelRegistry


def _open(_verb: str) -> Callable[[], None]:
    def dependency() -> None:
        return None

    return dependency


def build_resource_router(protected: bool) -> APIRouter:
    """CRUD router over the model registry; protected=True gates every verb by role capability."""
    guard = require_capability if protected else _open
    router = APIRouter()

    @router.post("/{model}", status_code=status.HTTP_201_CREATED, dependencies=[Depends(guard("create"))])
    def create_record(
        model: str,
        db: Annotated[Session, Depends(get_db)],
        registry: Annotated[ModelRegistry, Depends(get_registry)],
        payload: Annotated[Any, Depends(json_body)],
    ) -> dict[str, Any]:
        return registry.resolve(model).create(db, payload)

    @router.get("/{model}", dependencies=[Depends(guard("read"))])
    def list_records(
        model: str,
        db: Annotated[Session, Depends(get_db)],
        registry: Annotated[ModelRegistry, Depends(get_registry)],
    ) -> list[dict[str, Any]]:
        return registry.resolve(model).list(db)

    @router.get("/{model}/{record_id}", dependencies=[Depends(guard("read"))])
    def get_record(
        model: str,
        record_id: int,
        db: Annotated[Session, Depends(get_db)],
        registry: Annotated[ModelRegistry, Depends(get_registry)],
    ) -> dict[str, Any]:
        return registry.resolve(model).get(db, record_id)

    @router.put("/{model}/{record_id}", status_code=status.HTTP_201_CREATED, dependencies=[Depends(guard("update"))])
    def update_record(
        model: str,
        record_id: int,
        db: Annotated[Session, Depends(get_db)],
        registry: Annotated[ModelRegistry, Depends(get_registry)],
        payload: Annotated[Any, Depends(json_body)],
    ) -> dict[str, Any]:
        """Partial update; a PUT with no body returns the record unchanged."""
        return registry.resolve(model).update(db, record_id, payload)

    @router.delete(
        "/{model}/{record_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        dependencies=[Depends(guard("delete"))],
    )
    def delete_record(
        model: str,
        record_id: int,
        db: Annotated[Session, Depends(get_db)],
        registry: Annotated[ModelRegistry, Depends(get_registry)],
    ) -> Response:
        registry.resolve(model).delete(db, record_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
