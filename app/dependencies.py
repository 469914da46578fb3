from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from app.repos.posts_repo import FilePostsRepo
from app.services.asset_cache import AssetCache
from app.services.feed_service import FeedService
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService
from app.services.timezone_resolver import resolve_timezone
from app.settings import Settings, get_settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.posts_path)


def get_feed_service(repo=Depends(get_posts_repo)):
    return FeedService(repo=repo)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)


def get_asset_cache(request: Request) -> AssetCache:
    return request.app.state.asset_cache


def get_favicon_cache(request: Request) -> AssetCache:
    return request.app.state.favicon_cache


def get_page_renderer(request: Request) -> PageRenderer:
    return request.app.state.page_renderer


def get_viewer_timezone(
    request: Request, current_settings: Settings = Depends(get_settings)
) -> ZoneInfo:
    return resolve_timezone(
        request.headers,
        request.cookies,
        header_name=current_settings.TIMEZONE_HEADER,
        cookie_name=current_settings.TIMEZONE_COOKIE,
    )
