import logging
import sys
from pathlib import Path

from fastapi import FastAPI

from src.apps.api import router
from src.apps.web import pages
from src.config.logging import setup_logging
from src.config.settings import get_settings

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)

# --- アプリケーション初期化 ---

app = FastAPI(
    title="C++ Notes Search API",
    version="0.1.0",
    description="Keyword and tag search over a repository of C++ notes",
)

# --- DEBUG設定に基づきモックストアを有効化 ---

if settings.DEBUG:
    dev_path = Path(__file__).parent.parent / "dev"
    if dev_path.exists():
        sys.path.append(str(dev_path))
        logger.info("🔧 'dev' directory added to sys.path for mock imports.")
    else:
        logger.warning("⚠️ 'dev' directory not found. Using configured store.")
else:
    logger.info(f"🌐 Production mode: Using '{settings.STORE_BACKEND}' store")

app.include_router(router.router, prefix="/api")
app.include_router(pages.router)


@app.get("/health")
async def health_check():
    """
    Simple health check endpoint to confirm the API is running.
    """
    return {"status": "ok"}
