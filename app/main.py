import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.db.content_api import get_http_client
from app.repos.content_repo import ContentRepo
from app.routers import auth, posts, tags
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Content Gateway", description="Blog frontend gateway to the content API"
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.content_repo = ContentRepo(get_http_client())
    logger.info(f"Content gateway using {settings.content_api_url}")

    try:
        yield
    finally:
        await app.state.content_repo.aclose()
        logger.info("Content API client closed")


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(tags.router)
app.include_router(auth.router)


@app.get("/")
async def root():
    return {"message": "Content Gateway is running"}
