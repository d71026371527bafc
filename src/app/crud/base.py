import logging
from collections.abc import Mapping
from typing import Any, Union

from fastcrud import FastCRUD
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.db.database import Base
from ..core.db.insert_schema import InsertSchema

logger = logging.getLogger(__name__)


class InsertCRUD(FastCRUD):
    """FastCRUD that writes rows only through the table's insert validator."""

    def __init__(self, model: type[Base], insert_schema: type[InsertSchema]) -> None:
        super().__init__(model)
        self.insert_schema = insert_schema

    def validate(self, payload: Union[InsertSchema, Mapping[str, Any]]) -> InsertSchema:
        """Check a caller payload; raises ``pydantic.ValidationError`` on a bad shape."""
        if isinstance(payload, self.insert_schema):
            return payload
        try:
            return self.insert_schema.model_validate(payload)
        except ValidationError as e:
            # Locations only; payload values may hold secrets
            logger.warning(
                "Rejected %s payload: %s",
                self.model.__tablename__,
                [".".join(str(part) for part in err["loc"]) or err["type"] for err in e.errors()],
            )
            raise

    async def insert(self, db: AsyncSession, payload: Union[InsertSchema, Mapping[str, Any]]) -> Base:
        """Validate ``payload`` and insert it; ids and timestamps come from column defaults."""
        obj_in = self.validate(payload)
        db_obj = self.model(**obj_in.model_dump(exclude_unset=True))

        db.add(db_obj)
        await db.commit()
        await db.refresh(db_obj)

        logger.info("Inserted %r", db_obj)
        return db_obj
