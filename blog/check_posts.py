import argparse
import logging
from typing import List, Optional

from blog.repos.post_store import PostStore
from blog.services.posts_service import PostsService
from blog.settings import settings

logger = logging.getLogger(__name__)


def check_posts(directory: str) -> PostsService:
    service = PostsService(PostStore())
    service.reload(directory)

    for post in service.list_posts():
        logger.info(f"{post.date}  {post.slug}  [{', '.join(post.tags)}]")
    logger.info(f"Tags by frequency: {', '.join(service.all_tags()) or '(none)'}")
    return service


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Load a posts directory and report it")
    parser.add_argument("directory", nargs="?", default=settings.POSTS_DIR)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    service = check_posts(args.directory)
    logger.info(f"{len(service.store)} posts loaded from {args.directory}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
