import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from blog.repos.post_store import PostStore
from blog.routers import admin, posts
from blog.security import get_api_key
from blog.services.post_loader import load_posts
from blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog API", description="Markdown posts served from memory")
app.state.post_store = PostStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    load_posts(settings.posts_path, app.state.post_store)
    logger.info(f"Serving {len(app.state.post_store)} posts")
    yield


app.router.lifespan_context = lifespan

app.include_router(posts.router)
app.include_router(admin.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Blog API is running"}
