from zoneinfo import ZoneInfo

import pytest

from app.services.timezone_resolver import UTC, parse_timezone, resolve_timezone

HEADER = "X-Timezone"
COOKIE = "timezone"


def _resolve(headers=None, cookies=None):
    return resolve_timezone(
        headers or {}, cookies or {}, header_name=HEADER, cookie_name=COOKIE
    )


def test_header_wins_over_cookie():
    tz = _resolve({HEADER: "Asia/Tokyo"}, {COOKIE: "Europe/Paris"})

    assert tz == ZoneInfo("Asia/Tokyo")


def test_cookie_used_when_header_invalid():
    tz = _resolve({HEADER: "Mars/Olympus_Mons"}, {COOKIE: "Europe/Paris"})

    assert tz == ZoneInfo("Europe/Paris")


def test_falls_back_to_utc():
    assert _resolve() == UTC
    assert _resolve({HEADER: "  "}, {COOKIE: "not a zone"}) == UTC


def test_values_are_stripped():
    assert _resolve({HEADER: " America/Chicago "}) == ZoneInfo("America/Chicago")


@pytest.mark.parametrize("value", [None, "", "../../etc/passwd", "Nowhere/City", "\x00"])
def test_parse_timezone_rejects_unusable_values(value):
    assert parse_timezone(value) is None
