from typing import Optional

from fastapi import APIRouter, Response, status

from boardgames.database import SessionDep
from boardgames.schemas import RecordId, VoteUpdateSchema, vote_change
from boardgames.reviews.crud import fetch_reviews, select_review, add_review, update_review_votes, remove_review
from boardgames.reviews.schemas import (
    ReviewCreateSchema,
    ReviewListSchema,
    ReviewResponseSchema,
    ReviewDetailResponseSchema,
)


reviews_router = APIRouter(tags=['reviews'])

@reviews_router.get('/api/reviews', response_model=ReviewListSchema)
async def get_reviews(
    session: SessionDep,
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
    category: Optional[str] = None,
    limit: Optional[str] = None,
    p: Optional[str] = None,
):
    return await fetch_reviews(session, sort_by, order, category, limit, p)

@reviews_router.post(
    '/api/reviews',
    response_model=ReviewResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def post_review(session: SessionDep, review_data: ReviewCreateSchema):
    review = await add_review(
        session,
        owner=review_data.owner,
        title=review_data.title,
        review_body=review_data.review_body,
        designer=review_data.designer,
        category=review_data.category,
        review_img_url=review_data.review_img_url,
    )
    return {'review': review}

@reviews_router.get('/api/reviews/{review_id}', response_model=ReviewDetailResponseSchema)
async def get_review_by_id(session: SessionDep, review_id: RecordId):
    review = await select_review(session, review_id)
    return {'review': review}

@reviews_router.patch('/api/reviews/{review_id}', response_model=ReviewResponseSchema)
async def patch_review(session: SessionDep, review_id: RecordId, vote: Optional[VoteUpdateSchema] = None):
    review = await update_review_votes(session, review_id, vote_change(vote))
    return {'review': review}

@reviews_router.delete('/api/reviews/{review_id}', status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(session: SessionDep, review_id: RecordId):
    await remove_review(session, review_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
