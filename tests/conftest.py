"""Pytest configuration and fixtures for field types.

Settings are read from the environment; the cache is cleared around each
test so monkeypatched env vars take effect. All imports use fieldtypes.*.
"""

import pytest

from fieldtypes.core.config import get_settings
from fieldtypes.domain.entities.content import ContentInfo
from fieldtypes.field_types.relation import RelationType


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Clear cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def relation_type() -> RelationType:
    """Relation type with strict hash validation."""
    return RelationType(strict_hash=True)


@pytest.fixture
def permissive_relation_type() -> RelationType:
    """Relation type that builds values from hashes without validation."""
    return RelationType(strict_hash=False)


@pytest.fixture
def content_info() -> ContentInfo:
    return ContentInfo(id=42, remote_id="abc123", name="Destination")
