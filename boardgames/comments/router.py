from typing import Optional

from fastapi import APIRouter, Response, status

from boardgames.database import SessionDep
from boardgames.schemas import RecordId, VoteUpdateSchema, vote_change
from boardgames.comments.crud import fetch_comments_by_review_id, add_comment, update_comment_votes, remove_comment
from boardgames.comments.schemas import CommentCreateSchema, CommentListSchema, CommentResponseSchema


comments_router = APIRouter(tags=['comments'])

@comments_router.get('/api/reviews/{review_id}/comments', response_model=CommentListSchema)
async def get_comments_by_review_id(
    session: SessionDep,
    review_id: RecordId,
    limit: Optional[str] = None,
    p: Optional[str] = None,
):
    comments = await fetch_comments_by_review_id(session, review_id, limit, p)
    return {'comments': comments}

@comments_router.post(
    '/api/reviews/{review_id}/comments',
    response_model=CommentResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def post_comment_by_review_id(session: SessionDep, review_id: RecordId, comment_data: CommentCreateSchema):
    comment = await add_comment(session, review_id, comment_data.body, comment_data.username)
    return {'comment': comment}

@comments_router.patch('/api/comments/{comment_id}', response_model=CommentResponseSchema)
async def patch_comment_by_id(session: SessionDep, comment_id: RecordId, vote: Optional[VoteUpdateSchema] = None):
    comment = await update_comment_votes(session, comment_id, vote_change(vote))
    return {'comment': comment}

@comments_router.delete('/api/comments/{comment_id}', status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment_by_id(session: SessionDep, comment_id: RecordId):
    await remove_comment(session, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
