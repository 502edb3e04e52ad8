import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.schemas.blog import PostMetadata, PostPage
from app.services.posts_service import PostNotFoundError, PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostMetadata])
async def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all published posts metadata, newest first."""
    try:
        return await service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/slugs", response_model=List[str])
async def list_slugs(service: PostsService = Depends(deps.get_posts_service)):
    """Get every slug that has a content file, for static route generation."""
    try:
        return await service.list_slugs()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing slugs: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve slugs")


@router.get("/posts/{slug}", response_model=PostPage)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post with its previous/next neighbours."""
    try:
        return await service.get_post_page(slug)
    except PostNotFoundError as e:
        logger.info(f"Post {slug} not found: {e.reason}")
        raise HTTPException(status_code=404, detail="Post not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
