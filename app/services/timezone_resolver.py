import logging
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.settings import settings

logger = logging.getLogger(__name__)

UTC = ZoneInfo("UTC")


def parse_timezone(value: Optional[str]) -> Optional[ZoneInfo]:
    """Return the IANA zone named by value, or None when it is not usable."""
    if not value:
        return None
    name = value.strip()
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        logger.debug(f"Ignoring unusable timezone {name!r}: {e}")
        return None


def resolve_timezone(
    headers: Mapping[str, str],
    cookies: Mapping[str, str],
    *,
    header_name: str = settings.TIMEZONE_HEADER,
    cookie_name: str = settings.TIMEZONE_COOKIE,
) -> ZoneInfo:
    """
    Pick the viewer's display zone: header first, then cookie, then UTC.
    Never raises; a bad value just falls through to the next source.
    """
    for value in (headers.get(header_name), cookies.get(cookie_name)):
        tz = parse_timezone(value)
        if tz is not None:
            return tz
    return UTC
