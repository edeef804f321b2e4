import logging

from fastapi import APIRouter, Depends

from blog import dependencies as deps
from blog.schemas.blog import ReloadResult
from blog.security import get_settings
from blog.services.posts_service import PostsService
from blog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/reload", response_model=ReloadResult)
def reload_posts(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Re-read the posts directory and swap in the new snapshot."""
    service.reload(current_settings.posts_path)
    result = ReloadResult(
        posts=len(service.list_posts()), tags=len(service.all_tags())
    )
    logger.info(f"Reload finished: {result.posts} posts, {result.tags} tags")
    return result
