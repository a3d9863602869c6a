"""Slugs and dates derived from post filenames (`YYYY-MM-DD-title.md`)"""

import re
from datetime import date
from pathlib import Path
from typing import Optional


POST_NAME_RE = re.compile(r'^(\d{4})-(\d{2})-(\d{2})-(.+)$')


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = re.sub(r'[^\w\s-]', '', text.lower())
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-')


def split_post_name(path: Path) -> tuple[Optional[date], str]:
    """Return (date, title stem) from a post filename; date is None without a valid prefix."""
    m = POST_NAME_RE.match(path.stem)
    if not m:
        return None, path.stem
    try:
        return date(int(m[1]), int(m[2]), int(m[3])), m[4]
    except ValueError:
        return None, path.stem
