from enum import Enum
from typing import Any, Dict, Optional

from sqlalchemy import select, update, delete, func, Select
from sqlalchemy.ext.asyncio import AsyncSession

from boardgames.reviews.models import ReviewModel
from boardgames.comments.models import CommentModel
from boardgames.errors import NotFoundError, ValidationError
from boardgames.utils import check_exists, parse_pagination
from boardgames.logger import setup_logger


logger = setup_logger('reviews')

REVIEW_NOT_FOUND = 'Review does not exist'


class ReviewSortField(str, Enum):
    REVIEW_ID = 'review_id'
    TITLE = 'title'
    CATEGORY = 'category'
    DESIGNER = 'designer'
    OWNER = 'owner'
    REVIEW_BODY = 'review_body'
    REVIEW_IMG_URL = 'review_img_url'
    CREATED_AT = 'created_at'
    VOTES = 'votes'
    COMMENT_COUNT = 'comment_count'

class SortOrder(str, Enum):
    ASC = 'asc'
    DESC = 'desc'


comment_count = func.count(CommentModel.comment_id).label('comment_count')

SORT_COLUMNS = {
    ReviewSortField.REVIEW_ID: ReviewModel.review_id,
    ReviewSortField.TITLE: ReviewModel.title,
    ReviewSortField.CATEGORY: ReviewModel.category,
    ReviewSortField.DESIGNER: ReviewModel.designer,
    ReviewSortField.OWNER: ReviewModel.owner,
    ReviewSortField.REVIEW_BODY: ReviewModel.review_body,
    ReviewSortField.REVIEW_IMG_URL: ReviewModel.review_img_url,
    ReviewSortField.CREATED_AT: ReviewModel.created_at,
    ReviewSortField.VOTES: ReviewModel.votes,
    ReviewSortField.COMMENT_COUNT: comment_count,
}

LISTING_COLUMNS = (
    ReviewModel.owner,
    ReviewModel.title,
    ReviewModel.review_id,
    ReviewModel.category,
    ReviewModel.review_img_url,
    ReviewModel.created_at,
    ReviewModel.votes,
    ReviewModel.designer,
    comment_count,
)


def with_comment_count(query: Select) -> Select:
    return query.outerjoin(
        CommentModel, CommentModel.review_id == ReviewModel.review_id
    ).group_by(ReviewModel.review_id)


def review_listing_query(category: Optional[str]) -> Select:
    query = with_comment_count(select(*LISTING_COLUMNS))
    if category:
        query = query.where(ReviewModel.category == category)
    return query


def parse_sorting(sort_by: Optional[str], order: Optional[str]):
    try:
        sort_field = ReviewSortField(sort_by if sort_by is not None else ReviewSortField.CREATED_AT)
    except ValueError:
        raise ValidationError('Invalid sort_by query') from None

    try:
        sort_order = SortOrder(order if order is not None else SortOrder.DESC)
    except ValueError:
        raise ValidationError('Invalid order query') from None

    return sort_field, sort_order


async def fetch_reviews(
    session: AsyncSession,
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
    category: Optional[str] = None,
    limit: Optional[Any] = None,
    page: Optional[Any] = None,
) -> Dict[str, Any]:
    """Fetch one page of reviews with their comment counts.

    `sort_by` and `order` only ever reach the statement as members of
    ReviewSortField/SortOrder. The category filter is a bound parameter.
    The total count and the page are two separate statements.
    """
    sort_field, sort_order = parse_sorting(sort_by, order)
    limit, page = parse_pagination(limit, page)

    query = review_listing_query(category)

    total_count = await session.scalar(
        select(func.count()).select_from(query.subquery())
    )

    sort_column = SORT_COLUMNS[sort_field]
    ordering = sort_column.asc() if sort_order is SortOrder.ASC else sort_column.desc()
    page_query = query.order_by(ordering, ReviewModel.review_id).limit(limit).offset((page - 1) * limit)

    result = await session.execute(page_query)
    reviews = [dict(row) for row in result.mappings().all()]

    if not reviews and category:
        await check_exists(session, 'categories', 'slug', category)
        logger.warning(f"Category {category} has no reviews on page {page}")
        raise NotFoundError('This category has no associated reviews')

    logger.info(
        f"Fetched {len(reviews)} of {total_count} reviews "
        f"(sort_by={sort_field.value}, order={sort_order.value}, category={category}, page={page})"
    )
    return {'reviews': reviews, 'total_count': total_count, 'page': page}


async def select_review(session: AsyncSession, review_id: int) -> Dict[str, Any]:
    result = await session.execute(
        with_comment_count(select(*ReviewModel.__table__.c, comment_count)).
        where(ReviewModel.review_id == review_id)
    )
    review = result.mappings().first()

    if review is None:
        raise NotFoundError(REVIEW_NOT_FOUND)
    return dict(review)


async def add_review(
    session: AsyncSession,
    owner: Optional[str],
    title: Optional[str],
    review_body: Optional[str],
    designer: Optional[str],
    category: Optional[str],
    review_img_url: Optional[str] = None,
) -> ReviewModel:
    review = ReviewModel(
        owner=owner,
        title=title,
        review_body=review_body,
        designer=designer,
        category=category,
    )
    if review_img_url:
        review.review_img_url = review_img_url

    session.add(review)
    await session.commit()
    await session.refresh(review)

    logger.info(f"Review {review.review_id} created by {owner}")
    return review


async def update_review_votes(session: AsyncSession, review_id: int, inc_votes: int) -> Dict[str, Any]:
    result = await session.execute(
        update(ReviewModel).
        where(ReviewModel.review_id == review_id).
        values(votes=ReviewModel.votes + inc_votes).
        returning(*ReviewModel.__table__.c)
    )
    review = result.mappings().first()

    if review is None:
        raise NotFoundError(REVIEW_NOT_FOUND)

    review = dict(review)
    await session.commit()
    logger.info(f"Review {review_id} votes changed by {inc_votes}")
    return review


async def remove_review(session: AsyncSession, review_id: int) -> None:
    removed = await session.scalar(
        delete(ReviewModel).
        where(ReviewModel.review_id == review_id).
        returning(ReviewModel.review_id)
    )

    if removed is None:
        raise NotFoundError(REVIEW_NOT_FOUND)

    await session.commit()
    logger.info(f"Review {review_id} deleted")
