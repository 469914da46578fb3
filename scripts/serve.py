import logging

import uvicorn

from app.main import app
from app.settings import settings

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Listening on {settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
