from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from boardgames.users.models import UserModel
from boardgames.errors import NotFoundError
from boardgames.logger import setup_logger


logger = setup_logger('users')


async def fetch_users(session: AsyncSession) -> Sequence[UserModel]:
    result = await session.execute(select(UserModel))
    return result.scalars().all()


async def fetch_user_by_username(session: AsyncSession, username: str) -> UserModel:
    user = await session.get(UserModel, username)
    if not user:
        logger.warning(f"User {username} not found")
        raise NotFoundError('User does not exist')
    return user
