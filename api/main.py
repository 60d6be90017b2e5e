from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from comments import router as comments_router
from core import db, settings
from core.error_handlers import register_error_handlers
from discovery import router as discovery_router
from topics import router as topics_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings.setup_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    logger.info("api_started")
    try:
        yield
    finally:
        await db.close_pool()
        logger.info("api_stopped")


app = FastAPI(title="news-api", lifespan=lifespan)

# Allow the frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(discovery_router.router, tags=["api"])
app.include_router(topics_router.router, tags=["topics"])
app.include_router(articles_router.router, tags=["articles"])
app.include_router(comments_router.router, tags=["comments"])
app.include_router(users_router.router, tags=["users"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    """Serve the API with uvicorn (console script `news-api`)."""
    uvicorn.run(
        "main:app",
        host=settings.host(),
        port=settings.port(),
        log_level=settings.log_level().lower(),
    )


if __name__ == "__main__":
    run()
