from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Text, ForeignKey, func

from boardgames.config import settings
from boardgames.database import Base


class ReviewModel(Base):
    __tablename__ = 'reviews'

    review_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False
    )
    title: Mapped[str] = mapped_column(
        String,
        nullable=False
    )
    category: Mapped[str] = mapped_column(
        ForeignKey('categories.slug'),
        nullable=False
    )
    designer: Mapped[str] = mapped_column(
        String,
        nullable=False
    )
    owner: Mapped[str] = mapped_column(
        ForeignKey('users.username'),
        nullable=False
    )
    review_body: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )
    review_img_url: Mapped[str] = mapped_column(
        String,
        default=settings.DEFAULT_REVIEW_IMG_URL,
        nullable=False
    )
    votes: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )
