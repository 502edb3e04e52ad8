import textwrap

from app.services.posts_service import PostNotFoundError


class FakeRepo:
    """
    In-memory posts repo stand-in.
    Set track_calls=True to record list/read calls.
    """

    def __init__(self, sources: dict[str, str], track_calls: bool = False):
        self.sources = {
            slug: textwrap.dedent(raw).lstrip() for slug, raw in sources.items()
        }
        self.track_calls = track_calls
        self.calls = []

    async def list_slugs(self):
        if self.track_calls:
            self.calls.append("list_slugs")
        return sorted(self.sources)

    async def read_source(self, slug: str) -> str:
        if self.track_calls:
            self.calls.append(f"read:{slug}")
        if slug not in self.sources:
            raise FileNotFoundError(slug)
        return self.sources[slug]


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, list_slugs_return=None, get_post_page_return=None):
        self._list_posts_return = list_posts_return or []
        self._list_slugs_return = list_slugs_return or []
        self._get_post_page_return = get_post_page_return

    async def list_posts(self):
        return self._list_posts_return

    async def list_slugs(self):
        return self._list_slugs_return

    async def get_post_page(self, slug: str):
        if self._get_post_page_return is None:
            raise PostNotFoundError(slug)
        return self._get_post_page_return


def write_post(directory, slug: str, raw: str, extension: str = ".mdx"):
    """Write a dedented post file into ``directory`` and return its path."""
    path = directory / f"{slug}{extension}"
    path.write_text(textwrap.dedent(raw).lstrip(), encoding="utf-8")
    return path
