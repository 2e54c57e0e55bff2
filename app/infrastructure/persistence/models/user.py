"""User ORM model. Table: Users."""

from sqlalchemy import Integer, Unicode
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base


class User(Base):
    """User row: Id (store-generated primary key), FirstName, LastName."""

    __tablename__ = "Users"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column("FirstName", Unicode, nullable=False)
    last_name: Mapped[str] = mapped_column("LastName", Unicode, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"
