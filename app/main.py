import logging

from fastapi import FastAPI

from app.routers import posts
from app.schemas.blog import SiteConfig
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=f"{settings.SITE_NAME} Blog API", description=settings.SITE_DESCRIPTION)

app.include_router(posts.router)


@app.get("/")
async def root():
    site = SiteConfig(
        name=settings.SITE_NAME,
        description=settings.SITE_DESCRIPTION,
        author=settings.SITE_AUTHOR,
        url=settings.SITE_URL,
    )
    return {"message": "Blog API is running", "site": site.model_dump()}
