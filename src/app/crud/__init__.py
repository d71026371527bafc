from .crud_annotations import crud_annotations
from .crud_models import crud_models
from .crud_users import crud_users
