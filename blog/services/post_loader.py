import logging
from pathlib import Path
from typing import Callable, List, Union

from blog.exceptions import PostError
from blog.models import Post
from blog.repos.post_store import PostStore
from blog.services.post_parser import parse_post

logger = logging.getLogger(__name__)

POST_EXTENSION = ".md"


def load_posts(
    directory: Union[str, Path],
    store: PostStore,
    *,
    parse_fn: Callable[[Path], Post] = parse_post,
) -> None:
    """Parse every markdown file in ``directory`` and publish them to ``store``.

    Files that fail to parse are logged and skipped. The surviving posts are
    sorted newest first (files sharing a date keep filename order) and swapped
    into the store in one step. Nothing is returned; query the store to see
    the outcome.
    """
    directory = Path(directory)
    if not directory.exists():
        logger.warning(f"Posts directory {directory} not found, no posts loaded")
        store.replace(())
        return

    try:
        entries = sorted(
            (
                entry
                for entry in directory.iterdir()
                if entry.name.endswith(POST_EXTENSION) and entry.is_file()
            ),
            key=lambda entry: entry.name,
        )
    except OSError as e:
        logger.error(f"Failed to read posts directory {directory}: {e}")
        return

    posts: List[Post] = []
    for path in entries:
        try:
            post = parse_fn(path)
        except PostError as e:
            logger.error(f"Failed to parse {path}: {e.message}")
            continue
        except Exception:
            logger.exception(f"Failed to parse {path}")
            continue
        logger.info(f"Loaded post: {post.title}")
        posts.append(post)

    posts.sort(key=lambda post: post.date, reverse=True)
    store.replace(posts)
    logger.info(f"Loaded {len(posts)} of {len(entries)} posts from {directory}")
