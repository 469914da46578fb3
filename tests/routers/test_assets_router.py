from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.routers import assets
from app.services.asset_cache import AssetCache, get_content_type_from_filename
from app.settings import Settings, get_settings
from tests.conftest import CountingReader


def build_client(assets_dir, favicon_path=None, reader=None):
    current = Settings(ASSETS_DIR=str(assets_dir), FAVICON_PATH=str(favicon_path or ""))
    app = FastAPI()
    app.state.asset_cache = AssetCache(current.assets_path, reader=reader or CountingReader())
    app.state.favicon_cache = AssetCache(current.favicon_file.parent)
    app.dependency_overrides[get_settings] = lambda: current
    app.include_router(assets.router)
    return TestClient(app)


def test_get_asset_serves_bytes_with_long_cache_header(tmp_path):
    (tmp_path / "logo.png").write_bytes(b"PNGDATA")
    reader = CountingReader()
    client = build_client(tmp_path, reader=reader)

    first = client.get("/assets/logo.png")
    second = client.get("/assets/logo.png")

    assert first.status_code == 200
    assert first.content == second.content == b"PNGDATA"
    assert first.headers["Cache-Control"] == "public, max-age=31536000"
    assert first.headers["content-type"] == get_content_type_from_filename("logo.png")
    assert len(reader.calls) == 1


def test_get_asset_returns_404_when_missing(tmp_path):
    client = build_client(tmp_path)

    res = client.get("/assets/missing.css")

    assert res.status_code == 404


def test_get_asset_rejects_encoded_traversal(tmp_path):
    assets_dir = tmp_path / "assets"
    assets_dir.mkdir()
    (tmp_path / "secret.txt").write_text("nope")
    client = build_client(assets_dir)

    res = client.get("/assets/..%2Fsecret.txt")

    assert res.status_code == 404
    assert b"nope" not in res.content


def test_get_asset_returns_500_on_read_failure(tmp_path):
    (tmp_path / "locked.bin").write_bytes(b"x")

    def deny(path):
        raise PermissionError("denied")

    client = build_client(tmp_path, reader=deny)

    res = client.get("/assets/locked.bin")

    assert res.status_code == 500


def test_favicon_served_from_fixed_path(tmp_path):
    favicon = tmp_path / "favicon.ico"
    favicon.write_bytes(b"ICO")
    client = build_client(tmp_path / "assets", favicon_path=favicon)

    res = client.get("/favicon.ico")

    assert res.status_code == 200
    assert res.content == b"ICO"
    assert res.headers["Cache-Control"] == "public, max-age=31536000"


def test_favicon_missing_returns_404(tmp_path):
    client = build_client(tmp_path, favicon_path=tmp_path / "favicon.ico")

    res = client.get("/favicon.ico")

    assert res.status_code == 404
