import logging
from typing import Iterable, List, Optional, Tuple

from blog.models import Post
from blog.utils import ReadWriteLock

logger = logging.getLogger(__name__)


class PostStore:
    """In-memory snapshot of all loaded posts.

    The snapshot is an immutable tuple that is only ever swapped as a whole,
    so readers always see either the previous batch or the new one.
    """

    def __init__(self, posts: Iterable[Post] = ()):
        self._lock = ReadWriteLock()
        self._snapshot: Tuple[Post, ...] = tuple(posts)

    def replace(self, posts: Iterable[Post]) -> None:
        snapshot = tuple(posts)
        with self._lock.write_locked():
            self._snapshot = snapshot
        logger.debug(f"Post snapshot replaced ({len(snapshot)} posts)")

    def snapshot(self) -> Tuple[Post, ...]:
        with self._lock.read_locked():
            return self._snapshot

    def all(self) -> List[Post]:
        with self._lock.read_locked():
            return list(self._snapshot)

    def by_slug(self, slug: str) -> Optional[Post]:
        with self._lock.read_locked():
            return next((post for post in self._snapshot if post.slug == slug), None)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._snapshot)
