from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text

from boardgames.database import Base


class CategoryModel(Base):
    __tablename__ = 'categories'

    slug: Mapped[str] = mapped_column(
        String,
        primary_key=True,
        nullable=False
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )
