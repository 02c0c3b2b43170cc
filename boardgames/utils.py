from typing import Any, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from boardgames.database import Base
from boardgames.errors import NotFoundError, ValidationError


DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1
MAX_SQL_INTEGER = 2 ** 63 - 1
PAGINATION_MESSAGE = 'Limit and page queries should be a number value'


async def check_exists(session: AsyncSession, table: str, column: str, value: Any) -> None:
    """Raise NotFoundError unless a row of `table` has `column` equal to `value`.

    Table and column are resolved through the ORM metadata, so only mapped
    names reach the statement; the value is always a bound parameter.
    """
    target = Base.metadata.tables[table]
    target_column = target.c[column]

    found = await session.scalar(
        select(target_column).
        where(target_column == value).
        limit(1)
    )
    if found is None:
        raise NotFoundError('Resource not found in the database')


def parse_pagination(limit: Optional[Any], page: Optional[Any]) -> Tuple[int, int]:
    if limit is None:
        limit = DEFAULT_LIMIT
    if page is None:
        page = DEFAULT_PAGE

    try:
        limit, page = int(limit), int(page)
    except (TypeError, ValueError):
        raise ValidationError(PAGINATION_MESSAGE) from None

    if limit < 1 or page < 1:
        raise ValidationError(PAGINATION_MESSAGE)
    if limit > MAX_SQL_INTEGER or (page - 1) * limit > MAX_SQL_INTEGER:
        raise ValidationError(PAGINATION_MESSAGE)
    return limit, page
