import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.routers import assets, posts
from app.services.asset_cache import AssetCache
from app.services.page_renderer import PageRenderer
from app.settings import Settings, settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog", description="Posts and assets served from disk")


def init_state(app: FastAPI, current_settings: Settings) -> None:
    """One cache per root for the life of the process, shared by every handler."""
    app.state.asset_cache = AssetCache(current_settings.assets_path)
    app.state.favicon_cache = AssetCache(current_settings.favicon_file.parent)
    app.state.page_renderer = PageRenderer(current_settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_state(app, settings)
    logger.info(
        f"Serving posts from {settings.posts_path.resolve()} "
        f"and assets from {settings.assets_path.resolve()}"
    )
    try:
        yield
    finally:
        logger.info(
            f"Asset cache held {len(app.state.asset_cache)} files at shutdown"
        )


app.router.lifespan_context = lifespan

app.include_router(assets.router)
app.include_router(posts.router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
