from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from src.app.core.db.database import Base


class User(Base):
    __tablename__ = "users"

    # No surrogate key: a user row is exactly the two fields supplied at registration
    username: Mapped[str] = mapped_column(Text, primary_key=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"User(username={self.username!r})"
