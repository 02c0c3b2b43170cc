from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boardgames.config import settings
from boardgames.errors import register_error_handlers
from boardgames.router import main_router


app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(main_router)
