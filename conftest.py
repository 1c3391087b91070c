import pytest
from django.core.cache import caches


@pytest.fixture(autouse=True)
def clear_caches():
    """Rate-limit counters live in local-memory caches; start every test from zero."""
    for cache in caches.all():
        cache.clear()
    yield
