from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from blog.repos.post_store import PostStore
from blog.routers import admin
from blog.security import API_KEY_NAME, get_api_key, get_settings
from blog.settings import Settings
from tests.conftest import make_post


def make_app(settings: Settings, store: PostStore):
    app = FastAPI()
    app.state.post_store = store
    app.dependency_overrides[get_settings] = lambda: settings
    app.include_router(admin.router, dependencies=[Depends(get_api_key)])
    return app


def test_reload_requires_api_key(tmp_path):
    store = PostStore([make_post("kept")])
    client = TestClient(
        make_app(Settings(BLOG_API_KEY="secret", POSTS_DIR=str(tmp_path)), store)
    )

    res = client.post("/reload")
    assert res.status_code == 403

    res = client.post("/reload", headers={API_KEY_NAME: "wrong"})
    assert res.status_code == 403
    assert [p.slug for p in store.all()] == ["kept"]


def test_reload_loads_configured_directory(tmp_path):
    (tmp_path / "one.md").write_text(
        "---\ntitle: One\ndate: 2024-01-01\ntags: [a, b]\n---\nBody\n", encoding="utf-8"
    )
    (tmp_path / "broken.md").write_text("no frontmatter", encoding="utf-8")
    store = PostStore([make_post("stale")])
    client = TestClient(
        make_app(Settings(BLOG_API_KEY="secret", POSTS_DIR=str(tmp_path)), store)
    )

    res = client.post("/reload", headers={API_KEY_NAME: "secret"})

    assert res.status_code == 200
    assert res.json() == {"posts": 1, "tags": 2}
    assert [p.slug for p in store.all()] == ["one"]


def test_reload_missing_directory_empties_store(tmp_path):
    store = PostStore([make_post("stale")])
    client = TestClient(
        make_app(
            Settings(BLOG_API_KEY="secret", POSTS_DIR=str(tmp_path / "gone")), store
        )
    )

    res = client.post("/reload", headers={API_KEY_NAME: "secret"})

    assert res.status_code == 200
    assert res.json() == {"posts": 0, "tags": 0}
    assert store.all() == []
