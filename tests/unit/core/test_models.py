"""Unit tests for core/models.py"""

from datetime import date

import pytest
from pydantic import ValidationError

from postmatter.core.models import Document, PostMeta


def test_document_equality_ignores_metadata_container():
    """Documents compare by content, whatever mapping type built them."""
    assert Document(metadata={"title": "A"}, body="x") == Document(metadata=dict(title="A"), body="x")
    assert Document(metadata={"title": "A"}, body="x") != Document(metadata={"title": "B"}, body="x")


def test_document_copies_metadata():
    """Mutating the source dict does not change the Document."""
    source = {"title": "A"}
    doc = Document(metadata=source, body="")
    source["title"] = "B"
    assert doc.metadata["title"] == "A"


def test_post_meta_recognized_fields():
    """Recognized keys are exposed as typed attributes."""
    meta = PostMeta.model_validate({
        "layout": "post",
        "title": "Be the Best Version of Yourself",
        "date": date(2025, 1, 30),
        "categories": ["life"],
        "tags": ["Motivation"],
        "image": "https://example.com/a.png",
    })
    assert meta.title == "Be the Best Version of Yourself"
    assert meta.date == date(2025, 1, 30)
    assert meta.tags == ["Motivation"]


def test_post_meta_defaults():
    """Missing keys default to None or empty lists."""
    meta = PostMeta()
    assert meta.title is None
    assert meta.date is None
    assert meta.categories == []
    assert meta.tags == []


def test_post_meta_splits_space_separated_strings():
    """categories/tags given as one string are split on whitespace."""
    meta = PostMeta.model_validate({"categories": "blog tech", "tags": "sql"})
    assert meta.categories == ["blog", "tech"]
    assert meta.tags == ["sql"]


def test_post_meta_keeps_unknown_keys():
    """Unknown keys survive as extra fields."""
    meta = PostMeta.model_validate({"title": "T", "comments": "false"})
    assert meta.model_extra == {"comments": "false"}


def test_post_meta_is_frozen():
    """PostMeta instances are immutable."""
    meta = PostMeta(title="T")
    with pytest.raises(ValidationError):
        meta.title = "U"


def test_post_meta_rejects_list_title():
    """A title must be a single string."""
    with pytest.raises(ValidationError):
        PostMeta.model_validate({"title": ["a", "b"]})
