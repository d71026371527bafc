# app/api/v1/__init__.py
from fastapi import APIRouter

from .annotations import router as annotations_router
from .health import router as health_router
from .models import router as models_router
from .users import router as users_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(users_router)
router.include_router(models_router)
router.include_router(annotations_router)
