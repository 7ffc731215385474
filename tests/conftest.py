import json

import pytest

import app as app_module


@pytest.fixture
def app(tmp_path):
    """Create a Flask test app with the posts file pointed at a temp directory."""
    posts_file = tmp_path / "posts.json"
    posts_file.write_text("[]")

    flask_app = app_module.app
    flask_app.config["TESTING"] = True
    flask_app.config["POSTS_FILE"] = str(posts_file)
    flask_app.config["BASE_URL"] = "https://example.com"

    yield flask_app

    # Clean up config overrides
    for key in ("POSTS_FILE", "BASE_URL", "TESTING"):
        flask_app.config.pop(key, None)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def write_posts(app):
    def _write(posts):
        with open(app.config["POSTS_FILE"], "w") as f:
            json.dump(posts, f)
    return _write


@pytest.fixture
def minimal_options():
    return {
        "id": "1",
        "url": "https://example.com/posts/1",
        "content": "Hello <b>world</b>",
        "author": {"id": "a1", "displayName": "Jane Doe", "username": "jane"},
    }


@pytest.fixture
def sample_posts():
    return [
        {
            "id": "100",
            "title": "Getting Started with Eleventy",
            "url": "https://example.com/blog/eleventy-start",
            "content": "A guide to <strong>11ty</strong>",
            "createdAt": "2026-01-15T09:30:00.000Z",
            "author": {
                "id": "1",
                "displayName": "Jane Doe",
                "username": "jane",
                "url": "https://example.com/about",
                "avatarUrl": "https://example.com/avatar.png",
                "followersCount": 42,
            },
            "media": [
                {
                    "type": "image",
                    "url": "https://example.com/img/cover.jpg",
                    "width": 1200,
                    "height": 630,
                    "altText": "Cover image",
                },
            ],
        },
        {
            "id": "101",
            "text": "Plain text post\nwith <two> lines",
            "author": {"id": "1", "displayName": "Jane Doe", "username": "jane"},
        },
        {
            "id": "102",
            "content": "No author here",
        },
    ]
