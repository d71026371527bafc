from ..core.db.insert_schema import create_insert_schema
from ..core.schemas import IdSchema, UtcDatetime
from ..models.model import Model as ModelTable


class Model(IdSchema):
    name: str
    file_url: str
    file_type: str
    file_size: float
    uploaded_by: str
    uploaded_at: UtcDatetime


InsertModel = create_insert_schema(ModelTable, omit=("id", "uploaded_at"))
