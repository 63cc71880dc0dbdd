"""HTTP routes: auth at the root, open CRUD under v1 and role-gated CRUD under v2."""

from fastapi import APIRouter

from gatekeeper.api import auth, health
from gatekeeper.api.resources import build_resource_router

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(build_resource_router(protected=False), prefix="/api/v1", tags=["v1"])
router.include_router(build_resource_router(protected=True), prefix="/api/v2", tags=["v2"])
