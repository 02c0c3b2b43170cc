from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, Text, ForeignKey, func

from boardgames.database import Base


class CommentModel(Base):
    __tablename__ = 'comments'

    comment_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        nullable=False
    )
    body: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )
    review_id: Mapped[int] = mapped_column(
        ForeignKey('reviews.review_id', ondelete='CASCADE'),
        nullable=False
    )
    author: Mapped[str] = mapped_column(
        ForeignKey('users.username'),
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
