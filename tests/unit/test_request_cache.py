"""Tests for lr_cache — key derivation and the request cache."""

from decimal import Decimal

import pytest

from src.lr_cache.domain.cache_key import CacheKey, make_cache_key
from src.lr_cache.domain.request_cache import RequestCache
from src.lr_common.enums import Endpoint


class TestMakeCacheKey:
    def test_same_params_collide(self) -> None:
        a = make_cache_key("transactionsByEmployee", {"employeeId": "1"})
        b = make_cache_key("transactionsByEmployee", {"employeeId": "1"})
        assert a == b
        assert hash(a) == hash(b)

    def test_key_order_irrelevant_at_every_level(self) -> None:
        a = make_cache_key("x", {"a": 1, "b": {"c": 2, "d": 3}})
        b = make_cache_key("x", {"b": {"d": 3, "c": 2}, "a": 1})
        assert a == b

    def test_different_params_do_not_collide(self) -> None:
        assert make_cache_key("x", {"page": 1}) != make_cache_key("x", {"page": 2})

    def test_missing_and_null_param_differ(self) -> None:
        assert make_cache_key("x", {}) != make_cache_key("x", {"page": None})

    def test_list_order_matters(self) -> None:
        assert make_cache_key("x", {"ids": [1, 2]}) != make_cache_key("x", {"ids": [2, 1]})

    def test_same_params_different_endpoint_differ(self) -> None:
        assert make_cache_key("a", {"p": 1}) != make_cache_key("b", {"p": 1})

    def test_enum_endpoint_normalised_to_name(self) -> None:
        key = make_cache_key(Endpoint.EMPLOYEES, {})
        assert key == make_cache_key("employees", {})
        assert key.endpoint == "employees"

    def test_none_params_same_as_empty(self) -> None:
        assert make_cache_key("x", None) == make_cache_key("x", {})

    def test_decimal_params_supported(self) -> None:
        key = make_cache_key("x", {"amount": Decimal("1.50")})
        assert "1.50" in key.fingerprint

    def test_unsupported_param_type_raises(self) -> None:
        with pytest.raises(TypeError, match="object"):
            make_cache_key("x", {"bad": object()})


class TestRequestCache:
    def test_miss_returns_none(self) -> None:
        assert RequestCache().get(make_cache_key("employees")) is None

    def test_set_then_get(self) -> None:
        cache = RequestCache()
        key = make_cache_key("employees")
        cache.set(key, [{"id": "1"}])
        assert cache.get(key) == [{"id": "1"}]
        assert key in cache
        assert len(cache) == 1

    def test_get_returns_copy_not_stored_value(self) -> None:
        cache = RequestCache()
        key = make_cache_key("employees")
        cache.set(key, [{"id": "1"}])
        first = cache.get(key)
        first.append({"id": "2"})
        first[0]["id"] = "changed"
        assert cache.get(key) == [{"id": "1"}]

    def test_set_stores_copy_of_caller_value(self) -> None:
        cache = RequestCache()
        key = make_cache_key("employees")
        value = [{"id": "1"}]
        cache.set(key, value)
        value.clear()
        assert cache.get(key) == [{"id": "1"}]

    def test_evict_single_key(self) -> None:
        cache = RequestCache()
        k1 = make_cache_key("paginatedTransactions", {})
        k2 = make_cache_key("paginatedTransactions", {"page": 1})
        cache.set(k1, "a")
        cache.set(k2, "b")
        cache.evict(k1)
        assert cache.get(k1) is None
        assert cache.get(k2) == "b"

    def test_evict_missing_key_is_noop(self) -> None:
        cache = RequestCache()
        cache.evict(CacheKey("nope", "{}"))
        assert len(cache) == 0

    def test_evict_by_endpoint_spares_other_endpoints(self) -> None:
        cache = RequestCache()
        cache.set(make_cache_key("paginatedTransactions", {}), "p0")
        cache.set(make_cache_key("paginatedTransactions", {"page": 1}), "p1")
        cache.set(make_cache_key("transactionsByEmployee", {"employeeId": "1"}), "e1")
        cache.set(make_cache_key("employees", {}), "emps")

        removed = cache.evict_by_endpoint({"paginatedTransactions"})

        assert removed == 2
        assert cache.keys_for("paginatedTransactions") == []
        assert cache.get(make_cache_key("transactionsByEmployee", {"employeeId": "1"})) == "e1"
        assert cache.get(make_cache_key("employees", {})) == "emps"

    def test_evict_by_endpoint_accepts_enums(self) -> None:
        cache = RequestCache()
        cache.set(make_cache_key("transactionsByEmployee", {"employeeId": "1"}), "e1")
        cache.set(make_cache_key("paginatedTransactions", {}), "p0")
        cache.evict_by_endpoint([Endpoint.TRANSACTIONS_BY_EMPLOYEE])
        assert cache.keys_for(Endpoint.TRANSACTIONS_BY_EMPLOYEE) == []
        assert len(cache.keys_for(Endpoint.PAGINATED_TRANSACTIONS)) == 1

    def test_clear_all(self) -> None:
        cache = RequestCache()
        cache.set(make_cache_key("a"), 1)
        cache.set(make_cache_key("b"), 2)
        cache.clear_all()
        assert len(cache) == 0
