import json
from datetime import datetime, timezone
from pathlib import Path

from app.errors import NotFound
from app.schemas.blog import Post

FIXED_NOW = datetime(2024, 10, 29, 19, 5, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED_NOW


def make_payload(**overrides) -> dict:
    payload = {
        "title": "Hello World",
        "body": "# Hello\n\nFirst post.",
        "image_url": "/assets/hello.png",
        "summary": "A first post",
        "timestamp": "2024-10-01T12:00:00Z",
        "tags": ["software"],
    }
    payload.update(overrides)
    return payload


def make_post(slug: str = "hello", **overrides) -> Post:
    return Post.from_payload(make_payload(**overrides), slug=slug)


def write_post(root: Path, identifier: str, payload) -> Path:
    path = root / identifier
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return path


class FakeRepo:
    """
    Minimal posts repo stand-in used in service tests.
    """

    def __init__(self, posts):
        self.posts = list(posts)
        self.load_calls = 0

    def load_all_posts(self):
        self.load_calls += 1
        return list(self.posts)

    def get_post(self, slug):
        for post in self.posts:
            if post.slug == slug:
                return post
        raise NotFound(slug, "post file not found")


class CountingReader:
    """
    Wraps Path.read_bytes and records every path actually read.
    """

    def __init__(self):
        self.calls = []

    def __call__(self, path: Path) -> bytes:
        self.calls.append(path)
        return path.read_bytes()


class FakeFeedService:
    """
    Minimal feed service stand-in for router tests.
    """

    def __init__(self, cards=None, tags=None):
        self.cards = cards or []
        self.tags = tags or []
        self.calls = []

    def feed(self, viewer_tz, tag=None):
        self.calls.append((viewer_tz, tag))
        return self.cards

    def feed_with_tags(self, viewer_tz, tag=None):
        return self.feed(viewer_tz, tag), self.tags

    def all_tags(self):
        return self.tags


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, page=None, error=None):
        self.page = page
        self.error = error
        self.calls = []

    def get_post_page(self, slug, viewer_tz):
        self.calls.append((slug, viewer_tz))
        if self.error is not None:
            raise self.error
        return self.page
