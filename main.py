import uvicorn

from boardgames.config import settings


if __name__ == '__main__':
    uvicorn.run('boardgames.main:app', host=settings.HOST, port=settings.PORT)
