import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from app import dependencies as deps
from app.errors import NotFound, UpstreamIO
from app.services.asset_cache import AssetCache, get_content_type_from_filename
from app.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/assets/{filename:path}")
def get_asset(
    filename: str,
    cache: AssetCache = Depends(deps.get_asset_cache),
    current_settings: Settings = Depends(get_settings),
):
    """
    Serve a static file from the assets directory
    """
    return _cached_response(cache, filename, current_settings)


@router.get("/favicon.ico")
def get_favicon(
    cache: AssetCache = Depends(deps.get_favicon_cache),
    current_settings: Settings = Depends(get_settings),
):
    favicon = current_settings.favicon_file
    return _cached_response(cache, favicon.name, current_settings)


def _cached_response(
    cache: AssetCache, filename: str, current_settings: Settings
) -> Response:
    try:
        data = cache.get(filename)
    except NotFound:
        raise HTTPException(status_code=404, detail="Asset not found")
    except UpstreamIO:
        raise HTTPException(status_code=500, detail="Failed to read asset")

    headers = {"Cache-Control": current_settings.asset_cache_control}
    return Response(
        content=data,
        media_type=get_content_type_from_filename(filename),
        headers=headers,
    )
