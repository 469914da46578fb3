import logging
from datetime import tzinfo

from app.errors import NotFound
from app.schemas.blog import PostPage
from app.services.feed_service import Clock, format_timestamp, is_published, utc_now
from app.services.markdown_renderer import render_markdown
from app.utils import calculate_reading_time

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, clock: Clock = utc_now):
        self.repo = repo
        self.clock = clock

    def get_post_page(self, slug: str, viewer_tz: tzinfo) -> PostPage:
        """
        Load one post and render it for display.
        Scheduled posts are reported as missing so they cannot be read early.
        """
        post = self.repo.get_post(slug)
        if not is_published(post, self.clock()):
            logger.info(f"Post {slug} is scheduled for {post.publish_at.isoformat()}")
            raise NotFound(slug, "post is not published yet")

        return PostPage(
            slug=post.slug,
            title=post.title,
            image_url=post.image_url,
            published=format_timestamp(post.publish_at, viewer_tz),
            summary=post.summary,
            tags=post.tags,
            reading_time=calculate_reading_time(post.body),
            content_html=render_markdown(post.body),
        )
