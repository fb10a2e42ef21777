"""
Shared fixtures for the feedmedia test suite.
"""

import json
import os
from pathlib import Path

import pytest
from feedmedia.config import LazyConfig
from feedmedia.protocols import Extension

os.environ.setdefault("FEEDMEDIA_MONITORING__LOG_LEVEL", "WARNING")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# Extension tree fixtures
# ============================================================================


@pytest.fixture
def full_tree():
    """An extension tree exercising every supported media element."""
    return {
        "title": [Extension(value="Launch day")],
        "description": [Extension(value="Footage from the launch pad")],
        "keywords": [Extension(value="space, rockets ,launch")],
        "category": [
            Extension(value="News", attrs={"scheme": "dmoz", "label": "Top/News"}),
            Extension(value="Science"),
        ],
        "thumbnail": [
            Extension(attrs={"url": "http://x/y.png", "width": "120", "height": "80"}),
            Extension(attrs={"url": "http://x/z.png"}),
        ],
        "hash": [
            Extension(value="dfdec888b72151965a34b4b59031290a", attrs={"algo": "md5"}),
            Extension(value="aa5f3f8b", attrs={"algo": "sha-1"}),
        ],
    }


@pytest.fixture
def raw_item():
    """A namespace-keyed, JSON-like extension map as produced by feed parsers."""
    return {
        "media": {
            "title": [{"name": "title", "value": "Launch day", "attrs": {}, "children": {}}],
            "keywords": [{"name": "keywords", "value": "space,rockets"}],
            "thumbnail": [
                {"name": "thumbnail", "value": "", "attrs": {"url": "http://x/y.png", "width": "120", "height": 80}}
            ],
        },
        "itunes": {"author": [{"name": "author", "value": "NASA"}]},
    }


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document into the temp dir and return its path."""

    def _write(data, name="extensions.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_lazy_config():
    """Make every test start with an unloaded global settings proxy."""
    LazyConfig.reset()
    yield
    LazyConfig.reset()
