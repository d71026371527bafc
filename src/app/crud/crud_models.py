from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.model import Model
from ..schemas.model import InsertModel
from .base import InsertCRUD


class ModelCRUD(InsertCRUD):
    async def get_models(
        self, db: AsyncSession, uploaded_by: Optional[str] = None, offset: int = 0, limit: int = 100
    ) -> List[Model]:
        """Get uploaded models, newest first, optionally only one uploader's."""
        stmt = select(self.model)
        if uploaded_by is not None:
            stmt = stmt.where(self.model.uploaded_by == uploaded_by)
        stmt = stmt.order_by(self.model.uploaded_at.desc(), self.model.id.desc()).offset(offset).limit(limit)
        result = await db.execute(stmt)
        return list(result.scalars().all())


crud_models = ModelCRUD(Model, InsertModel)
