from typing import Optional

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String

from boardgames.database import Base


class UserModel(Base):
    __tablename__ = 'users'

    username: Mapped[str] = mapped_column(
        String,
        primary_key=True,
        nullable=False
    )
    name: Mapped[str] = mapped_column(
        String,
        nullable=False
    )
    avatar_url: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )
