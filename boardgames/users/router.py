from fastapi import APIRouter

from boardgames.database import SessionDep
from boardgames.users.crud import fetch_users, fetch_user_by_username
from boardgames.users.schemas import UserListSchema, UserResponseSchema


users_router = APIRouter(tags=['users'])

@users_router.get('/api/users', response_model=UserListSchema)
async def get_users(session: SessionDep):
    users = await fetch_users(session)
    return {'users': users}

@users_router.get('/api/users/{username}', response_model=UserResponseSchema)
async def get_user_by_username(session: SessionDep, username: str):
    user = await fetch_user_by_username(session, username)
    return {'user': user}
