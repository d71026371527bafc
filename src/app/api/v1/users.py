from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...core.db.database import async_get_db
from ...core.exceptions.http_exceptions import NotFoundException
from ...crud.crud_users import crud_users
from ...schemas.user import InsertUser, UserRead

router = APIRouter(tags=["users"])


@router.post("/users", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: InsertUser, db: AsyncSession = Depends(async_get_db)):
    """Register a user. The password is never echoed back."""
    return await crud_users.insert(db, user)


@router.get("/users/{username}", response_model=UserRead)
async def get_user(username: str, db: AsyncSession = Depends(async_get_db)):
    user = await crud_users.get(db, username=username)
    if not user:
        raise NotFoundException("User not found")
    return user
