import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from blog import dependencies as deps
from blog.schemas.blog import PostDetail, PostSummary
from blog.security import get_settings
from blog.services.posts_service import PostsService
from blog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostSummary])
def list_posts(
    tag: Optional[str] = None,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get all posts metadata, newest first, optionally limited to one tag."""
    try:
        return service.list_posts(tag=tag)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/latest", response_model=List[PostSummary])
def latest_posts(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    try:
        return service.latest_posts(current_settings.LATEST_POSTS_LIMIT)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing latest posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        post = service.get_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/tags", response_model=List[str])
def list_tags(service: PostsService = Depends(deps.get_posts_service)):
    """Get every tag, most used first."""
    try:
        return service.all_tags()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing tags: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve tags")
