"""Front matter splitting, YAML decoding, and serialization"""

import re
from datetime import date, datetime
from typing import Any, Iterable, Optional

import yaml

from postmatter.core.errors import MalformedHeader
from postmatter.core.models import Document


MARKER = '---'
DATE_KEYS = ('date',)
BOM = '\ufeff'
DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})(?:[T ].*)?$")
LINE_RE = re.compile(r"(?<=\n)")


class _StringLoader(yaml.SafeLoader):
    """SafeLoader with no implicit resolvers: every untagged scalar loads as str."""
    yaml_implicit_resolvers = {}


def _is_marker(line: str, marker: str) -> bool:
    return line.rstrip() == marker


def split_document(text: str, marker: str = MARKER) -> tuple[Optional[str], str]:
    """Return (header, body); header is None when text does not open with a marker line."""
    lines = LINE_RE.split(text)
    if not _is_marker(lines[0].lstrip(BOM), marker):
        return None, text

    for i in range(1, len(lines)):
        if _is_marker(lines[i], marker):
            return ''.join(lines[1:i]), ''.join(lines[i + 1:])

    raise MalformedHeader(f"opening '{marker}' has no matching closing '{marker}'", line=1)


def _parse_date(key: str, value: Any) -> date:
    """Coerce a date key to a calendar date; any time or zone suffix is dropped."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    m = DATE_RE.match(value.strip()) if isinstance(value, str) else None
    if m:
        try:
            return date.fromisoformat(m.group(1))
        except ValueError:
            pass
    raise MalformedHeader(f"'{key}' is not a YYYY-MM-DD date: {value!r}")


def _normalize(key: str, value: Any, date_keys: Iterable[str]) -> Any:
    if key in date_keys:
        return _parse_date(key, value)
    if isinstance(value, dict):
        return {str(k): _normalize(str(k), v, ()) for k, v in value.items()}
    if isinstance(value, list):
        items = []
        for item in value:
            if isinstance(item, (dict, list)):
                raise MalformedHeader(f"'{key}' must be a sequence of scalars")
            items.append('' if item is None else str(item))
        return items
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def decode_header(header: str, date_keys: Iterable[str] = DATE_KEYS) -> dict[str, Any]:
    """Decode a front matter block into a key -> value mapping.

    Plain scalars stay strings (no int/bool/null coercion); keys in date_keys
    become datetime.date; sequences become lists of strings. Raises
    MalformedHeader with a line number relative to the file (the opening
    marker is line 1).
    """
    try:
        data = yaml.load(header, Loader=_StringLoader)
    except yaml.YAMLError as e:
        mark = getattr(e, 'problem_mark', None)
        line = mark.line + 2 if mark is not None else None
        problem = getattr(e, 'problem', None) or str(e)
        raise MalformedHeader(f"invalid YAML in front matter: {problem}", line=line) from e

    if data is None or data == '':
        return {}
    if not isinstance(data, dict):
        raise MalformedHeader(f"front matter must be a mapping, got {type(data).__name__}", line=2)

    date_keys = tuple(date_keys)
    return {str(k): _normalize(str(k), v, date_keys) for k, v in data.items()}


def parse_document(
    text: str,
    marker: str = MARKER,
    date_keys: Iterable[str] = DATE_KEYS,
    ) -> Document:
    """Parse raw file text into a Document; body is everything after the closing marker, verbatim."""
    header, body = split_document(text, marker)
    if header is None:
        return Document(metadata={}, body=body)
    return Document(metadata=decode_header(header, date_keys), body=body)


class _HeaderDumper(yaml.SafeDumper):
    """SafeDumper that writes sequences in flow style (`tags: [a, b]`)."""


def _represent_list(dumper: yaml.SafeDumper, data: list) -> yaml.SequenceNode:
    return dumper.represent_sequence('tag:yaml.org,2002:seq', data, flow_style=True)


_HeaderDumper.add_representer(list, _represent_list)


def serialize_document(document: Document, marker: str = MARKER) -> str:
    """Write a Document back to text; parse_document() of the result equals document."""
    body = document.body
    if not document.metadata:
        if not _is_marker(body.split('\n', 1)[0].lstrip(BOM), marker):
            return body
        return f"{marker}\n{marker}\n{body}"

    header = yaml.dump(
        dict(document.metadata),
        Dumper=_HeaderDumper,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=float('inf'),
    )
    return f"{marker}\n{header}{marker}\n{body}"
