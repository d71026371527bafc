"""Room annotation endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.db.database import async_get_db
from ...core.exceptions.http_exceptions import NotFoundException
from ...crud.crud_annotations import crud_annotations
from ...schemas.annotation import Annotation, InsertAnnotation

router = APIRouter(tags=["annotations"])


@router.post("/annotations", response_model=Annotation, status_code=status.HTTP_201_CREATED)
async def create_annotation(annotation: InsertAnnotation, db: AsyncSession = Depends(async_get_db)):
    """Pin a new annotation inside a room."""
    return await crud_annotations.insert(db, annotation)


@router.get("/annotations/{annotation_id}", response_model=Annotation)
async def get_annotation(annotation_id: str, db: AsyncSession = Depends(async_get_db)):
    annotation = await crud_annotations.get(db, id=annotation_id)
    if not annotation:
        raise NotFoundException("Annotation not found")
    return annotation


@router.get("/rooms/{room_id}/annotations", response_model=List[Annotation])
async def get_room_annotations(
    room_id: str,
    offset: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: AsyncSession = Depends(async_get_db),
):
    """Get all annotations for a room, oldest first."""
    return await crud_annotations.get_room_annotations(db, room_id, offset=offset, limit=limit)
