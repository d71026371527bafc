"""CRUD operations for room annotations."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.annotation import Annotation
from ..schemas.annotation import InsertAnnotation
from .base import InsertCRUD


class AnnotationCRUD(InsertCRUD):
    async def get_room_annotations(
        self, db: AsyncSession, room_id: str, offset: int = 0, limit: int = 100
    ) -> List[Annotation]:
        """Get all annotations for a room in the order they were created."""
        stmt = (
            select(self.model)
            .where(self.model.room_id == room_id)
            .order_by(self.model.created_at.asc(), self.model.id.asc())
            .offset(offset)
            .limit(limit)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())


crud_annotations = AnnotationCRUD(Annotation, InsertAnnotation)
