import json
from pathlib import Path

from fastapi import APIRouter

from boardgames.categories.router import categories_router
from boardgames.reviews.router import reviews_router
from boardgames.comments.router import comments_router
from boardgames.users.router import users_router


ENDPOINTS_PATH = Path(__file__).with_name('endpoints.json')

main_router = APIRouter()

@main_router.get('/api', tags=['api'])
async def get_endpoints():
    endpoints = json.loads(ENDPOINTS_PATH.read_text(encoding='utf-8'))
    return {'endpoints': endpoints}

main_router.include_router(categories_router)
main_router.include_router(reviews_router)
main_router.include_router(comments_router)
main_router.include_router(users_router)
