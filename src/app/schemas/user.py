from ..core.db.insert_schema import create_insert_schema
from ..core.schemas import CamelSchema
from ..models.user import User as UserTable


class UserRead(CamelSchema):
    username: str


class User(UserRead):
    password: str


# Callers may set exactly these two fields
InsertUser = create_insert_schema(UserTable, pick=("username", "password"))
