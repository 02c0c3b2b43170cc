import asyncio
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from boardgames.database import new_async_session, init_models, drop_models
from boardgames.categories.models import CategoryModel
from boardgames.users.models import UserModel
from boardgames.reviews.models import ReviewModel
from boardgames.comments.models import CommentModel
from boardgames.logger import setup_logger


logger = setup_logger('seed')

SEED_ORDER = (
    ('categories', CategoryModel),
    ('users', UserModel),
    ('reviews', ReviewModel),
    ('comments', CommentModel),
)


def parse_timestamp(value):
    if not isinstance(value, str):
        return value
    timestamp = datetime.fromisoformat(value)
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc).replace(tzinfo=None)
    return timestamp


def build_rows(model, rows: List[Dict[str, Any]]):
    built = []
    for row in rows:
        row = dict(row)
        if 'created_at' in row:
            row['created_at'] = parse_timestamp(row['created_at'])
        built.append(model(**row))
    return built


async def seed(session: AsyncSession, data: Dict[str, List[Dict[str, Any]]]) -> None:
    """Recreate every table and insert `data` table by table.

    Rows are flushed per table in the given order, so generated ids follow
    the order of the input lists.
    """
    await drop_models()
    await init_models()

    for key, model in SEED_ORDER:
        session.add_all(build_rows(model, data.get(key, [])))
        await session.flush()

    await session.commit()
    logger.info(
        "Database seeded: " +
        ", ".join(f"{len(data.get(key, []))} {key}" for key, _ in SEED_ORDER)
    )


async def seed_from_file(path: str) -> None:
    with open(path, encoding='utf-8') as file:
        data = json.load(file)

    async with new_async_session() as session:
        await seed(session, data)


if __name__ == '__main__':
    if len(sys.argv) != 2:
        print('Usage: python -m boardgames.seed <data.json>')
        sys.exit(1)
    asyncio.run(seed_from_file(sys.argv[1]))
