import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable, Iterable, List, Optional, Tuple

from app.schemas.blog import Post, PostCard

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(instant: datetime, tz: tzinfo) -> str:
    """e.g. "October 29, 2024 3:05 PM EDT"."""
    local = instant.astimezone(tz)
    hour = local.hour % 12 or 12
    return (
        f"{local:%B} {local.day}, {local.year} "
        f"{hour}:{local:%M} {local:%p} {local.tzname()}"
    )


def is_published(post: Post, now: datetime) -> bool:
    return post.publish_at <= now


def post_link(slug: str) -> str:
    return f"/post/{slug}"


def render_feed(
    posts: Iterable[Post],
    viewer_tz: tzinfo,
    tag: Optional[str] = None,
    *,
    now: datetime,
) -> List[PostCard]:
    """
    Build feed cards in the order the posts were given.
    Scheduled posts are always dropped; the tag match is exact.
    """
    cards = []
    for post in posts:
        if not is_published(post, now):
            continue
        if tag is not None and tag not in post.tags:
            continue
        cards.append(
            PostCard(
                slug=post.slug,
                title=post.title,
                image_url=post.image_url,
                published=format_timestamp(post.publish_at, viewer_tz),
                summary=post.summary,
                link=post_link(post.slug),
                tags=post.tags,
            )
        )
    return cards


def collect_tags(posts: Iterable[Post], now: datetime) -> List[str]:
    """Sorted distinct tags of the published posts."""
    return sorted(
        {tag for post in posts if is_published(post, now) for tag in post.tags}
    )


class FeedService:
    def __init__(self, repo, clock: Clock = utc_now):
        self.repo = repo
        self.clock = clock

    def feed(self, viewer_tz: tzinfo, tag: Optional[str] = None) -> List[PostCard]:
        cards, _tags = self.feed_with_tags(viewer_tz, tag)
        return cards

    def feed_with_tags(
        self, viewer_tz: tzinfo, tag: Optional[str] = None
    ) -> Tuple[List[PostCard], List[str]]:
        """Cards and sidebar tags built from a single read of the posts."""
        posts = self.repo.load_all_posts()
        now = self.clock()
        cards = render_feed(posts, viewer_tz, tag, now=now)
        logger.debug(f"Feed for tag={tag!r}: {len(cards)} of {len(posts)} posts")
        return cards, collect_tags(posts, now)

    def all_tags(self) -> List[str]:
        return collect_tags(self.repo.load_all_posts(), self.clock())
