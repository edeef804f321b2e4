from fastapi import Depends, Request

from blog.repos.post_store import PostStore
from blog.services.posts_service import PostsService


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store


def get_posts_service(store: PostStore = Depends(get_post_store)) -> PostsService:
    return PostsService(store)
