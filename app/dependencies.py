from fastapi import Depends

from app.cache import ResultCache
from app.repos.posts_repo import FilesystemPostsRepo
from app.services.posts_service import PostsService
from app.settings import settings

_shared_cache: ResultCache | None = None


def get_posts_repo():
    return FilesystemPostsRepo(settings.posts_path, settings.POST_EXTENSION)


def get_posts_cache() -> ResultCache:
    """Fresh cache per request unless a ttl asks for a shared one."""
    global _shared_cache
    if settings.POSTS_CACHE_TTL_SECONDS <= 0:
        return ResultCache()
    if _shared_cache is None or _shared_cache.ttl_seconds != settings.POSTS_CACHE_TTL_SECONDS:
        _shared_cache = ResultCache(ttl_seconds=settings.POSTS_CACHE_TTL_SECONDS)
    return _shared_cache


def get_posts_service(
    repo=Depends(get_posts_repo),
    cache=Depends(get_posts_cache),
):
    return PostsService(repo=repo, cache=cache)
