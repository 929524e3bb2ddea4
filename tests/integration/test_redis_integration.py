"""Integration tests for the Redis cache against a local Redis."""

import pytest

from core.cache import RedisCache


@pytest.mark.integration
def test_set_get_delete(redis_client):
    cache = RedisCache(redis_client, default_ttl=30)

    assert cache.ping() is True
    assert cache.get("wayfarer-test:trips:CAN:BOM::") is None

    cache.set("wayfarer-test:trips:CAN:BOM::", "[]")
    assert cache.get("wayfarer-test:trips:CAN:BOM::") == "[]"
    assert 0 < redis_client.ttl("wayfarer-test:trips:CAN:BOM::") <= 30

    cache.delete("wayfarer-test:trips:CAN:BOM::")
    assert cache.get("wayfarer-test:trips:CAN:BOM::") is None


@pytest.mark.integration
def test_explicit_ttl_overrides_default(redis_client):
    cache = RedisCache(redis_client, default_ttl=30)

    cache.set("wayfarer-test:trip:1", "{}", 5)

    assert 0 < redis_client.ttl("wayfarer-test:trip:1") <= 5
