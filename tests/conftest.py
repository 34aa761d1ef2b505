"""Shared pytest fixtures and configuration for the price-editor test suite.

Guidelines
----------
* No real terminal in any test — key input is scripted.
* Filesystem writes go to ``tmp_path`` only.
* Core tests must be pure — no side effects.
"""

from __future__ import annotations

import pytest

from price_editor.core.editor import PriceEditor
from price_editor.core.models import Catalog


def make_catalog() -> Catalog:
    """Three-entry catalog used across the suite."""
    return Catalog.from_pairs([("A", 10.0), ("B", 20.0), ("C", 5.0)])


@pytest.fixture
def catalog() -> Catalog:
    return make_catalog()


@pytest.fixture
def editor(catalog: Catalog) -> PriceEditor:
    return PriceEditor(catalog)
