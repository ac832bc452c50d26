"""Example resource ORM model: fruits."""

from __future__ import annotations

import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.database import Base


def _new_key() -> str:
    return str(uuid.uuid4())


class Fruit(Base):
    """A named fruit.

    uuid is a string UUID assigned on flush and never changed afterwards.
    name is not unique at the database level; uniqueness is checked by the
    resource before persisting.
    """

    __tablename__ = "fruits"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_key)
    name: Mapped[str] = mapped_column(Text, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"Fruit(uuid={self.uuid!r}, name={self.name!r})"
