"""SQLAlchemy ORM rows.

Rows never leave the repository layer; they are converted to entities
before being returned to services.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from user_service.entities import UserEntity


class Base(DeclarativeBase):
    """Declarative base for all tables."""


class UserRow(Base):
    """Persistence model for users."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)

    def to_entity(self) -> UserEntity:
        return UserEntity(id=self.id, name=self.name, phone=self.phone)
