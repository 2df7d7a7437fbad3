"""Top-level API router — includes versioned sub-routers.

Versions are mounted at the root, so article routes live under ``/v1/articles``.
"""

from fastapi import APIRouter

from app.presentation.api.v1.router import router as v1_router

router = APIRouter()
router.include_router(v1_router)
