import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional

from app.settings import settings

logger = logging.getLogger(__name__)


class FilesystemPostsRepo:
    def __init__(self, posts_dir: Optional[Path] = None, extension: Optional[str] = None):
        self.posts_dir = Path(posts_dir) if posts_dir else settings.posts_path
        self.extension = extension or settings.POST_EXTENSION

    async def list_slugs(self) -> List[str]:
        return await asyncio.to_thread(self._list_slugs)

    async def read_source(self, slug: str) -> str:
        """Read the raw file for ``slug``. Raises FileNotFoundError for unsafe slugs."""
        path = self.path_for(slug)
        if path is None:
            raise FileNotFoundError(f"No post file for slug {slug!r}")
        # BOM is dropped and undecodable bytes become U+FFFD
        return await asyncio.to_thread(path.read_text, encoding="utf-8-sig", errors="replace")

    def path_for(self, slug: str) -> Optional[Path]:
        """Path of the file for ``slug``, or None if the slug could name anything outside the posts dir.

        Symlinked post files are followed when read.
        """
        if (
            not slug
            or slug.startswith(".")
            or "/" in slug
            or os.sep in slug
            or "\x00" in slug
        ):
            logger.warning(f"Rejected unsafe slug: {slug!r}")
            return None
        return self.posts_dir / f"{slug}{self.extension}"

    def _list_slugs(self) -> List[str]:
        # os.listdir raises if the directory is missing or unreadable
        names = sorted(os.listdir(self.posts_dir))
        return [
            name[: -len(self.extension)]
            for name in names
            if name.endswith(self.extension) and len(name) > len(self.extension)
        ]
