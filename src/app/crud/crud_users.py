from sqlalchemy.exc import IntegrityError

from ..core.exceptions.http_exceptions import DuplicateValueException
from ..models.user import User
from ..schemas.user import InsertUser
from .base import InsertCRUD


class UserCRUD(InsertCRUD):
    async def insert(self, db, payload) -> User:
        user_in = self.validate(payload)
        if await self.exists(db, username=user_in.username):
            raise DuplicateValueException("Username is already taken")

        try:
            return await super().insert(db, user_in)
        except IntegrityError:
            # Registered concurrently between the check and the commit
            await db.rollback()
            raise DuplicateValueException("Username is already taken")


crud_users = UserCRUD(User, InsertUser)
