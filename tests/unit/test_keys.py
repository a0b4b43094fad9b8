"""Tests for cache key encoding."""

from app.repositories.common import CacheKeys, encode_params, entry_key, meta_key


class TestEncodeParams:
    def test_order_independent(self):
        p1 = {"listingId": 42, "from": "2024-01-01", "to": "2024-06-30"}
        p2 = {"to": "2024-06-30", "listingId": 42, "from": "2024-01-01"}
        assert encode_params(p1) == encode_params(p2)

    def test_none_values_dropped(self):
        assert encode_params({"a": 1, "b": None}) == encode_params({"a": 1})

    def test_empty_is_blank(self):
        assert encode_params(None) == ""
        assert encode_params({}) == ""
        assert encode_params({"a": None}) == ""

    def test_sorted_serialization(self):
        assert encode_params({"b": 2, "a": 1}) == '{"a":1,"b":2}'

    def test_different_values_differ(self):
        assert encode_params({"a": 1}) != encode_params({"a": 2})

    def test_nested_keys_sorted(self):
        assert encode_params({"f": {"y": 1, "x": 2}}) == encode_params({"f": {"x": 2, "y": 1}})

    def test_list_order_kept(self):
        assert encode_params({"ids": [1, 2]}) != encode_params({"ids": [2, 1]})


class TestKeyLayout:
    def test_plain(self):
        assert entry_key("cache_listings") == "cache_listings"
        assert meta_key("cache_listings") == "cache_listings_meta"

    def test_with_params(self):
        params = encode_params({"a": 1})
        assert entry_key("cache_listings", params) == 'cache_listings_{"a":1}'
        assert meta_key("cache_listings", params) == 'cache_listings_meta_{"a":1}'

    def test_cache_keys_are_strings(self):
        assert entry_key(CacheKeys.MONTHLY_REVENUE) == "cache_monthly_revenue"
