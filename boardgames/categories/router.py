from fastapi import APIRouter, status

from boardgames.database import SessionDep
from boardgames.categories.crud import fetch_categories, add_category
from boardgames.categories.schemas import CategoryCreateSchema, CategoryListSchema, CategoryResponseSchema


categories_router = APIRouter(tags=['categories'])

@categories_router.get('/api/categories', response_model=CategoryListSchema)
async def get_categories(session: SessionDep):
    categories = await fetch_categories(session)
    return {'categories': categories}

@categories_router.post(
    '/api/categories',
    response_model=CategoryResponseSchema,
    status_code=status.HTTP_201_CREATED
)
async def post_category(session: SessionDep, category_data: CategoryCreateSchema):
    category = await add_category(session, category_data.slug, category_data.description)
    return {'category': category}
