from typing import Any, Optional

from ..core.db.insert_schema import create_insert_schema
from ..core.schemas import IdSchema, UtcDatetime
from ..models.annotation import Annotation as AnnotationTable


class Annotation(IdSchema):
    room_id: str
    title: str
    description: Optional[str] = None
    position: Any
    created_by: str
    created_at: UtcDatetime


InsertAnnotation = create_insert_schema(AnnotationTable, omit=("id", "created_at"))
