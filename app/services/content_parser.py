import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import frontmatter
import markdown
from markdown.extensions.toc import slugify_unicode
from pydantic import ValidationError

from app.schemas.blog import PostFrontmatter, PostMetadata, TocEntry

logger = logging.getLogger(__name__)

MD_EXTENSIONS = ["extra", "sane_lists", "toc"]
MD_EXTENSION_CONFIGS = {
    # Heading text is wrapped in a link to its own anchor
    "toc": {"anchorlink": True, "slugify": slugify_unicode},
}


class FrontmatterError(ValueError):
    """Front matter is missing, malformed or fails validation."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = errors or []


@dataclass
class RenderedContent:
    html: str
    toc: List[TocEntry] = field(default_factory=list)


def parse_frontmatter(source: str) -> Tuple[dict, str]:
    """Split a content file into its front matter dict and Markdown body."""
    try:
        parsed = frontmatter.loads(source)
    except Exception as e:
        raise FrontmatterError(f"Malformed front matter: {e}", [str(e)]) from e

    metadata = {key: _convert_date(value) for key, value in parsed.metadata.items()}
    return metadata, parsed.content


def validate_frontmatter(metadata: dict) -> PostFrontmatter:
    if not metadata:
        raise FrontmatterError("Front matter is missing")
    try:
        return PostFrontmatter.model_validate(metadata)
    except ValidationError as e:
        raise FrontmatterError("Front matter failed validation", e.errors()) from e


def normalize_metadata(slug: str, data: PostFrontmatter) -> PostMetadata:
    return PostMetadata(
        slug=slug,
        title=data.title,
        summary=data.summary,
        publishedAt=data.publishedAt,
        tags=list(data.tags),
    )


def render_markdown(body: str) -> RenderedContent:
    """
    Compile a Markdown body to HTML.

    Tables, fenced code and footnotes are enabled, every heading gets an id
    and its text is wrapped in a link to that id. The heading tree is returned
    alongside the HTML.
    """
    md = markdown.Markdown(
        extensions=MD_EXTENSIONS,
        extension_configs=MD_EXTENSION_CONFIGS,
        output_format="html",
    )
    html = md.convert(body)
    toc = [TocEntry.model_validate(token) for token in getattr(md, "toc_tokens", [])]
    return RenderedContent(html=html, toc=toc)


def _convert_date(value):
    # PyYAML turns unquoted dates into date objects
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return value
