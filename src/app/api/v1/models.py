"""Uploaded 3D model endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.db.database import async_get_db
from ...core.exceptions.http_exceptions import NotFoundException
from ...crud.crud_models import crud_models
from ...schemas.model import InsertModel, Model

router = APIRouter(tags=["models"])


@router.post("/models", response_model=Model, status_code=status.HTTP_201_CREATED)
async def create_model(model: InsertModel, db: AsyncSession = Depends(async_get_db)):
    """Record an uploaded model. The file itself is stored elsewhere; only its URL is kept."""
    return await crud_models.insert(db, model)


@router.get("/models", response_model=List[Model])
async def get_models(
    uploaded_by: Optional[str] = Query(None, alias="uploadedBy"),
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(async_get_db),
):
    return await crud_models.get_models(db, uploaded_by=uploaded_by, offset=offset, limit=limit)


@router.get("/models/{model_id}", response_model=Model)
async def get_model(model_id: str, db: AsyncSession = Depends(async_get_db)):
    model = await crud_models.get(db, id=model_id)
    if not model:
        raise NotFoundException("Model not found")
    return model
