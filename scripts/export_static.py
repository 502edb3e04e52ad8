import asyncio
import json
import logging
import sys
from pathlib import Path

from app.cache import ResultCache
from app.repos.posts_repo import FilesystemPostsRepo
from app.services.posts_service import PostNotFoundError, PostsService
from app.settings import settings

logger = logging.getLogger(__name__)


async def export_site(output_dir: Path, service: PostsService) -> list[str]:
    """Write the home listing and one page per slug as JSON. Returns exported slugs."""
    posts_dir = output_dir / "posts"
    posts_dir.mkdir(parents=True, exist_ok=True)

    listing = await service.list_posts()
    _write_json(
        output_dir / "index.json",
        [
            {**post.model_dump(), "url": settings.absolute_url(f"/posts/{post.slug}")}
            for post in listing
        ],
    )

    exported = []
    for slug in await service.list_slugs():
        try:
            page = await service.get_post_page(slug)
        except PostNotFoundError as e:
            logger.warning(f"Skipping {slug}: {e.reason}")
            continue
        _write_json(posts_dir / f"{slug}.json", page.model_dump())
        exported.append(slug)

    logger.info(f"Exported {len(exported)} posts to {output_dir}")
    return exported


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("out")
    service = PostsService(repo=FilesystemPostsRepo(), cache=ResultCache())
    try:
        asyncio.run(export_site(output, service))
    except Exception as e:
        logger.error(f"Export failed: {e}", exc_info=True)
        sys.exit(1)
