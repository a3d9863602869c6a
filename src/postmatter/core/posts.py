"""Post discovery and loading: read files, parse front matter, derive slug and date"""

import hashlib
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from pydantic import ValidationError

from postmatter.config import Settings
from postmatter.core.errors import MalformedHeader
from postmatter.core.frontmatter import DATE_KEYS, MARKER, parse_document
from postmatter.core.models import Post, PostMeta
from postmatter.core.utils.slug import slugify, split_post_name


logger = logging.getLogger(__name__)


def discover_files(path: Path, extensions: Iterable[str] = ('.md', '.markdown')) -> list[Path]:
    """Return sorted post files under path, or [path] if a single matching file."""
    extensions = {e.lower() for e in extensions}
    if path.is_file():
        return [path] if path.suffix.lower() in extensions else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in extensions)


def post_slug(path: Path, metadata: Mapping[str, Any]) -> str:
    """Slug from the `slug` key, else the filename stem without its date prefix."""
    explicit = metadata.get('slug')
    if isinstance(explicit, str) and explicit.strip():
        return explicit.strip()
    _, stem = split_post_name(path)
    return slugify(stem)


def parse_post(
    path: Path,
    text: str,
    marker: str = MARKER,
    date_keys: Iterable[str] = DATE_KEYS,
    ) -> Post:
    """Build a Post from raw text; the filename date fills in a missing `date` key."""
    try:
        document = parse_document(text, marker, date_keys)
    except MalformedHeader as e:
        raise e.with_path(path) from e

    if not document.metadata:
        logger.warning("No front matter in %s", path)

    fields = dict(document.metadata)
    if 'date' not in fields:
        file_date, _ = split_post_name(path)
        if file_date is not None:
            fields['date'] = file_date

    try:
        meta = PostMeta.model_validate(fields)
    except ValidationError as e:
        raise MalformedHeader(f"unexpected value types: {e}", path=path) from e

    return Post(
        path=path,
        slug=post_slug(path, document.metadata),
        document=document,
        meta=meta,
        content_hash=hashlib.sha256(text.encode('utf-8')).hexdigest(),
    )


def load_post(path: Path, settings: Optional[Settings] = None) -> Post:
    """Read and parse a single post file."""
    settings = settings or Settings()
    text = path.read_bytes().decode(settings.encoding)
    post = parse_post(path, text, settings.marker, settings.date_keys)
    logger.debug("Parsed %s (%d metadata keys)", path, len(post.document.metadata))
    return post


def load_posts(path: Optional[Path] = None, settings: Optional[Settings] = None) -> list[Post]:
    """Load every post file under path (default: settings.posts_dir) in path order.

    Stops at the first malformed file.
    """
    settings = settings or Settings()
    path = Path(settings.posts_dir) if path is None else path
    posts = [load_post(p, settings) for p in discover_files(path, settings.extensions)]
    logger.info("Loaded %d post(s) from %s", len(posts), path)
    return posts
