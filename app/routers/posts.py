import logging
from typing import List, Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.errors import MalformedContent, NotFound
from app.schemas.blog import PostCard
from app.services.feed_service import FeedService
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService
from app.services.timezone_resolver import parse_timezone
from app.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()
TIMEZONE_COOKIE_MAX_AGE = 31536000


@router.get("/", response_class=HTMLResponse)
def feed_page(
    request: Request,
    tag: Optional[str] = None,
    service: FeedService = Depends(deps.get_feed_service),
    viewer_tz: ZoneInfo = Depends(deps.get_viewer_timezone),
    pages: PageRenderer = Depends(deps.get_page_renderer),
    current_settings: Settings = Depends(get_settings),
):
    """Feed of published posts, optionally narrowed to one tag."""
    try:
        tag = normalize_tag(tag)
        cards, tags = service.feed_with_tags(viewer_tz, tag)
        html = pages.feed(cards, tags, active_tag=tag)
    except Exception as e:
        logger.error(f"Unexpected error rendering feed: {e}")
        return HTMLResponse(pages.error(), status_code=500)

    response = HTMLResponse(html)
    remember_timezone(request, response, current_settings)
    return response


@router.get("/post/{slug}", response_class=HTMLResponse)
def post_page(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    viewer_tz: ZoneInfo = Depends(deps.get_viewer_timezone),
    pages: PageRenderer = Depends(deps.get_page_renderer),
    current_settings: Settings = Depends(get_settings),
):
    """A single post with its body rendered from Markdown."""
    try:
        page = service.get_post_page(slug, viewer_tz)
    except NotFound:
        return HTMLResponse(pages.not_found("post"), status_code=404)
    except MalformedContent as e:
        logger.error(f"Post {slug} is malformed: {e}")
        return HTMLResponse(pages.error(), status_code=500)
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        return HTMLResponse(pages.error(), status_code=500)

    response = HTMLResponse(pages.post(page))
    remember_timezone(request, response, current_settings)
    return response


@router.get("/api/posts", response_model=List[PostCard])
def list_posts(
    tag: Optional[str] = None,
    service: FeedService = Depends(deps.get_feed_service),
    viewer_tz: ZoneInfo = Depends(deps.get_viewer_timezone),
):
    """Feed cards as JSON."""
    try:
        return service.feed(viewer_tz, normalize_tag(tag))
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


def normalize_tag(tag: Optional[str]) -> Optional[str]:
    """A blank tag query means no filter."""
    if tag is None or not tag.strip():
        return None
    return tag


def remember_timezone(request: Request, response, current_settings: Settings) -> None:
    """Persist a valid header zone in the cookie so later visits keep it."""
    header_value = request.headers.get(current_settings.TIMEZONE_HEADER)
    tz = parse_timezone(header_value)
    if tz is None:
        return
    if request.cookies.get(current_settings.TIMEZONE_COOKIE) == tz.key:
        return
    response.set_cookie(
        current_settings.TIMEZONE_COOKIE,
        tz.key,
        max_age=TIMEZONE_COOKIE_MAX_AGE,
        samesite="lax",
    )
