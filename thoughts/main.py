import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from thoughts.routers import articles, sitemap
from thoughts.security import get_api_key
from thoughts.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Thoughts API", description="Content index for the Thoughts site")


@asynccontextmanager
async def lifespan(app: FastAPI):
    content_path = settings.content_path
    if content_path.is_dir():
        logger.info(f"Serving articles from {content_path.resolve()}")
    else:
        logger.warning(f"Content directory {content_path} does not exist")
    if settings.is_development:
        logger.info("Development mode: draft articles are listed")
    yield


app.router.lifespan_context = lifespan

app.include_router(sitemap.router)
app.include_router(articles.router, dependencies=[Depends(get_api_key)])


@app.get("/")
async def root():
    return {"message": "Thoughts API is running"}
