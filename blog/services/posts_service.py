import logging
from collections import Counter
from pathlib import Path
from typing import List, Optional, Union

from blog.models import Post
from blog.repos.post_store import PostStore
from blog.services.post_loader import load_posts

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, store: PostStore):
        self.store = store

    def list_posts(self, tag: Optional[str] = None) -> List[Post]:
        posts = self.store.all()
        if tag is None:
            return posts
        return [post for post in posts if tag in post.tags]

    def get_post(self, slug: str) -> Optional[Post]:
        return self.store.by_slug(slug)

    def latest_posts(self, limit: int) -> List[Post]:
        return list(self.store.snapshot()[: max(limit, 0)])

    def all_tags(self) -> List[str]:
        """Distinct tags, most used first.

        Tags used equally often are ordered alphabetically.
        """
        return rank_tags(self.store.snapshot())

    def reload(self, directory: Union[str, Path]) -> None:
        logger.info(f"Reloading posts from {directory}")
        load_posts(directory, self.store)


def rank_tags(posts) -> List[str]:
    counts = Counter(tag for post in posts for tag in post.tags)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [tag for tag, _ in ranked]
