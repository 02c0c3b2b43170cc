from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from boardgames.categories.models import CategoryModel
from boardgames.errors import ValidationError
from boardgames.logger import setup_logger


logger = setup_logger('categories')


async def fetch_categories(session: AsyncSession) -> Sequence[CategoryModel]:
    result = await session.execute(select(CategoryModel))
    return result.scalars().all()


async def add_category(
    session: AsyncSession,
    slug: Optional[str],
    description: Optional[str]
) -> CategoryModel:
    if not slug:
        raise ValidationError('Category should include a valid slug')
    if not description:
        raise ValidationError('Category should include a valid description')

    category = CategoryModel(slug=slug, description=description)
    session.add(category)
    await session.commit()

    logger.info(f"Category created: {slug}")
    return category
