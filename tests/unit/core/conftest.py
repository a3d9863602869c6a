"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_POST = """\
---
layout: post
title: "Be the Best Version of Yourself"
date: 2025-01-30
categories: [life]
tags: [SQL, Query, Optimization, PSQL, MySQL]
image: https://example.com/cover.png
---

# Heading

Body with a rule below.

---

Footer paragraph.
"""


@pytest.fixture(name="sample_post")
def sample_post_fixture() -> str:
    return SAMPLE_POST
