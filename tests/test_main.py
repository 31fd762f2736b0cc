from fastapi.testclient import TestClient

from blogsite import dependencies as deps
from blogsite.main import app
from tests.conftest import make_settings, write_post


def test_blog_routes_are_registered():
    assert app.url_path_for("list_posts") == "/blog/"
    assert app.url_path_for("get_post", slug="hello") == "/blog/hello/"


def test_app_renders_posts_from_disk(tmp_path, posts_dir):
    write_post(posts_dir, "hello", "---\ntitle: Hello World\n---\nHi\n")

    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_settings] = lambda: make_settings(tmp_path)
    try:
        with TestClient(app) as client:
            res = client.get("/blog/")
            assert res.status_code == 200
            assert "Hello World" in res.text

            res = client.get("/blog/hello/")
            assert res.status_code == 200
            assert "Hello World" in res.text

            res = client.get("/blog/missing/")
            assert res.status_code == 404

            res = client.get("/nowhere")
            assert res.status_code == 404
    finally:
        app.dependency_overrides = original_overrides
