import asyncio
import logging
from typing import List, Optional

from app.cache import ResultCache
from app.schemas.blog import Post, PostMetadata, PostNavigation, PostPage
from app.services.content_parser import (
    FrontmatterError,
    normalize_metadata,
    parse_frontmatter,
    render_markdown,
    validate_frontmatter,
)

logger = logging.getLogger(__name__)

POSTS_CACHE_KEY = "posts"
SLUGS_CACHE_KEY = "slugs"


class PostNotFoundError(LookupError):
    def __init__(self, slug: str, reason: str = "not found"):
        super().__init__(f"Post {slug!r} unavailable: {reason}")
        self.slug = slug
        self.reason = reason


class PostsService:
    def __init__(self, repo, cache: Optional[ResultCache] = None):
        self.repo = repo
        self.cache = cache if cache is not None else ResultCache()

    async def list_posts(self) -> List[PostMetadata]:
        """Published posts, newest first."""
        return await self.cache.get_or_set(POSTS_CACHE_KEY, self._load_posts)

    async def list_slugs(self) -> List[str]:
        """Every slug with a content file, published or not."""
        return await self.cache.get_or_set(SLUGS_CACHE_KEY, self.repo.list_slugs)

    async def get_post_by_slug(self, slug: str) -> Post:
        try:
            source = await self.repo.read_source(slug)
        except FileNotFoundError as e:
            raise PostNotFoundError(slug, "no content file") from e
        except OSError as e:
            logger.warning(f"Failed to read post {slug}: {e}")
            raise PostNotFoundError(slug, "unreadable content file") from e

        try:
            metadata, body = parse_frontmatter(source)
            data = validate_frontmatter(metadata)
        except FrontmatterError as e:
            logger.info(f"Post {slug} has invalid front matter: {e.errors}")
            raise PostNotFoundError(slug, "missing required front matter") from e

        if data.draft:
            raise PostNotFoundError(slug, "draft")

        rendered = render_markdown(body)
        return Post(
            **normalize_metadata(slug, data).model_dump(),
            content=rendered.html,
            toc=rendered.toc,
        )

    async def get_post_navigation(self, slug: str) -> PostNavigation:
        posts = await self.list_posts()
        index = next((i for i, post in enumerate(posts) if post.slug == slug), None)
        if index is None:
            return PostNavigation()
        return PostNavigation(
            previous=posts[index - 1] if index > 0 else None,
            next=posts[index + 1] if index < len(posts) - 1 else None,
        )

    async def get_post_page(self, slug: str) -> PostPage:
        post = await self.get_post_by_slug(slug)
        navigation = await self.get_post_navigation(slug)
        return PostPage(post=post, previous=navigation.previous, next=navigation.next)

    async def _load_posts(self) -> List[PostMetadata]:
        slugs = await self.list_slugs()
        sources = await asyncio.gather(*(self.repo.read_source(slug) for slug in slugs))

        posts = []
        for slug, source in zip(slugs, sources):
            post = parse_post_metadata(slug, source)
            if post:
                posts.append(post)

        # Slug order first so equal dates come out alphabetically
        posts.sort(key=lambda p: p.slug)
        posts.sort(key=lambda p: p.published_date, reverse=True)
        return posts


def parse_post_metadata(slug: str, source: str) -> Optional[PostMetadata]:
    """Parse and validate a post's front matter; None if it is invalid or a draft."""
    try:
        metadata, _body = parse_frontmatter(source)
        data = validate_frontmatter(metadata)
    except FrontmatterError as e:
        logger.debug(f"Skipping post {slug}: {e}")
        return None

    if data.draft:
        logger.debug(f"Skipping draft post {slug}")
        return None

    return normalize_metadata(slug, data)
