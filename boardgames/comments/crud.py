from typing import Any, Dict, Optional, Sequence

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession

from boardgames.comments.models import CommentModel
from boardgames.reviews.models import ReviewModel
from boardgames.errors import NotFoundError, ValidationError
from boardgames.utils import parse_pagination
from boardgames.logger import setup_logger


logger = setup_logger('comments')

COMMENT_NOT_FOUND = 'Comment does not exist'


async def ensure_review_exists(session: AsyncSession, review_id: int) -> None:
    review = await session.get(ReviewModel, review_id)
    if not review:
        logger.warning(f"Review {review_id} not found")
        raise NotFoundError('Review does not exist')


async def fetch_comments_by_review_id(
    session: AsyncSession,
    review_id: int,
    limit: Optional[Any] = None,
    page: Optional[Any] = None,
) -> Sequence[CommentModel]:
    limit, page = parse_pagination(limit, page)
    await ensure_review_exists(session, review_id)

    result = await session.execute(
        select(CommentModel).
        where(CommentModel.review_id == review_id).
        order_by(CommentModel.created_at.desc(), CommentModel.comment_id).
        limit(limit).
        offset((page - 1) * limit)
    )
    return result.scalars().all()


async def add_comment(
    session: AsyncSession,
    review_id: int,
    body: Optional[str],
    username: Optional[str]
) -> CommentModel:
    if not body and not username:
        raise ValidationError('Missing valid body and author information')
    if not body:
        raise ValidationError('Missing valid body information')
    if not username:
        raise ValidationError('Missing valid author information')

    await ensure_review_exists(session, review_id)

    comment = CommentModel(body=body, author=username, review_id=review_id)
    session.add(comment)
    await session.commit()
    await session.refresh(comment)

    logger.info(f"Comment {comment.comment_id} added to review {review_id} by {username}")
    return comment


async def update_comment_votes(session: AsyncSession, comment_id: int, inc_votes: int) -> Dict[str, Any]:
    result = await session.execute(
        update(CommentModel).
        where(CommentModel.comment_id == comment_id).
        values(votes=CommentModel.votes + inc_votes).
        returning(*CommentModel.__table__.c)
    )
    comment = result.mappings().first()

    if comment is None:
        raise NotFoundError(COMMENT_NOT_FOUND)

    comment = dict(comment)
    await session.commit()
    logger.info(f"Comment {comment_id} votes changed by {inc_votes}")
    return comment


async def remove_comment(session: AsyncSession, comment_id: int) -> None:
    removed = await session.scalar(
        delete(CommentModel).
        where(CommentModel.comment_id == comment_id).
        returning(CommentModel.comment_id)
    )

    if removed is None:
        raise NotFoundError(COMMENT_NOT_FOUND)

    await session.commit()
    logger.info(f"Comment {comment_id} deleted")
