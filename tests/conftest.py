import datetime
import textwrap

import pytest

from blog.models import Post


def make_post(
    slug: str,
    date: str = "2024-01-01",
    *,
    title=None,
    tags=(),
    summary: str = "",
    html_content: str = "<p>body</p>",
) -> Post:
    return Post(
        slug=slug,
        title=title or slug.replace("-", " ").title(),
        date=datetime.date.fromisoformat(date),
        tags=tuple(tags),
        summary=summary,
        html_content=html_content,
    )


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_posts_return=None,
        get_post_return=None,
        latest_posts_return=None,
        tags_return=None,
    ):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._latest_posts_return = latest_posts_return or []
        self._tags_return = tags_return or []
        self.calls = []

    def list_posts(self, tag=None):
        self.calls.append(("list_posts", tag))
        return self._list_posts_return

    def get_post(self, slug: str):
        self.calls.append(("get_post", slug))
        return self._get_post_return

    def latest_posts(self, limit: int):
        self.calls.append(("latest_posts", limit))
        return self._latest_posts_return

    def all_tags(self):
        self.calls.append(("all_tags",))
        return self._tags_return

    def reload(self, directory):
        self.calls.append(("reload", directory))


@pytest.fixture
def write_post(tmp_path):
    """Write a markdown file into tmp_path; content is dedented first."""

    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return path

    return _write
