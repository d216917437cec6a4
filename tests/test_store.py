"""
PasteStore unit tests.

The store takes the current time as a parameter, so every test drives it
with an explicit clock.
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from ephemeral_paste.store import PasteStore

T0 = 1_704_067_200_000


class TestCreate:

    def test_unconstrained_paste(self, store):
        paste = store.create("hello", now=T0)

        assert paste.content == "hello"
        assert paste.created_at == T0
        assert paste.expires_at is None
        assert paste.max_views is None
        assert paste.view_count == 0
        assert paste.id in store

    def test_ttl_sets_absolute_expiry(self, store):
        paste = store.create("hello", ttl_seconds=60, now=T0)
        assert paste.expires_at == T0 + 60_000

    def test_fractional_ttl_rounds_up(self, store):
        paste = store.create("hello", ttl_seconds=0.0001, now=T0)
        assert paste.expires_at == T0 + 1

    def test_ids_are_unique(self, store):
        ids = {store.create("x", now=T0).id for _ in range(100)}
        assert len(ids) == 100
        assert len(store) == 100

    def test_defaults_to_wall_clock(self, store):
        paste = store.create("hello")
        assert paste.created_at > T0

    @pytest.mark.parametrize("ttl_seconds", [1e306, 1.7e308])
    def test_huge_finite_ttl(self, store, ttl_seconds):
        paste = store.create("hello", ttl_seconds=ttl_seconds, now=T0)

        assert isinstance(paste.expires_at, int)
        assert paste.expires_at > T0 + 10**300
        assert store.retrieve(paste.id, now=T0).content == "hello"


class TestRetrieve:

    def test_unknown_id(self, store):
        assert store.retrieve("does-not-exist", now=T0) is None

    def test_unconstrained_paste_is_returned(self, store):
        paste = store.create("hello", now=T0)

        snapshot = store.retrieve(paste.id, now=T0)

        assert snapshot.content == "hello"
        assert snapshot.created_at == T0
        assert snapshot.expires_at is None
        assert snapshot.views_remaining is None

    def test_unlimited_views_keep_counting(self, store):
        paste = store.create("hello", now=T0)
        for _ in range(10):
            assert store.retrieve(paste.id, now=T0) is not None
        assert paste.view_count == 10

    @pytest.mark.parametrize("max_views", [1, 2, 5])
    def test_exactly_max_views_retrievals_succeed(self, store, max_views):
        paste = store.create("hello", max_views=max_views, now=T0)

        remaining = [store.retrieve(paste.id, now=T0).views_remaining for _ in range(max_views)]

        assert remaining == list(range(max_views - 1, -1, -1))
        assert store.retrieve(paste.id, now=T0) is None
        assert paste.id not in store
        assert store.retrieve(paste.id, now=T0) is None

    def test_single_view_paste(self, store):
        paste = store.create("hello", max_views=1, now=T0)

        assert store.retrieve(paste.id, now=T0).views_remaining == 0
        assert store.retrieve(paste.id, now=T0) is None

    def test_evicting_attempt_is_counted(self, store):
        paste = store.create("hello", max_views=1, now=T0)
        store.retrieve(paste.id, now=T0)
        store.retrieve(paste.id, now=T0)
        assert paste.view_count == 2

    def test_before_expiry(self, store):
        paste = store.create("hello", ttl_seconds=60, now=T0)

        snapshot = store.retrieve(paste.id, now=T0 + 59_999)

        assert snapshot.content == "hello"
        assert snapshot.expires_at == T0 + 60_000

    def test_at_expiry_evicts(self, store):
        paste = store.create("hello", ttl_seconds=60, now=T0)

        assert store.retrieve(paste.id, now=T0 + 60_000) is None
        assert paste.id not in store
        # Going back in time does not resurrect it
        assert store.retrieve(paste.id, now=T0) is None

    def test_time_limit_hit_first(self, store):
        paste = store.create("hello", ttl_seconds=10, max_views=5, now=T0)

        assert store.retrieve(paste.id, now=T0 + 1_000).views_remaining == 4
        assert store.retrieve(paste.id, now=T0 + 10_000) is None
        assert store.retrieve(paste.id, now=T0 + 1_000) is None

    def test_view_limit_hit_first(self, store):
        paste = store.create("hello", ttl_seconds=3600, max_views=2, now=T0)

        assert store.retrieve(paste.id, now=T0).views_remaining == 1
        assert store.retrieve(paste.id, now=T0).views_remaining == 0
        assert store.retrieve(paste.id, now=T0 + 1) is None
        assert len(store) == 0

    def test_other_pastes_unaffected_by_eviction(self, store):
        doomed = store.create("a", max_views=1, now=T0)
        kept = store.create("b", now=T0)

        store.retrieve(doomed.id, now=T0)
        store.retrieve(doomed.id, now=T0)

        assert kept.id in store
        assert store.retrieve(kept.id, now=T0).content == "b"

    @pytest.mark.parametrize("max_views", [1, 3, 10])
    def test_concurrent_retrievals_respect_view_limit(self, store, max_views):
        paste = store.create("hello", max_views=max_views, now=T0)

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _: store.retrieve(paste.id, now=T0), range(50)))

        served = [r for r in results if r is not None]
        assert len(served) == max_views
        assert sorted(r.views_remaining for r in served) == list(range(max_views))
        assert paste.id not in store


class TestSweep:

    def test_removes_only_expired(self, store):
        expired = store.create("a", ttl_seconds=1, now=T0)
        live = store.create("b", ttl_seconds=120, now=T0)
        forever = store.create("c", now=T0)

        assert store.sweep(now=T0 + 1_000) == 1

        assert expired.id not in store
        assert live.id in store
        assert forever.id in store

    def test_does_not_count_views(self, store):
        paste = store.create("a", max_views=1, now=T0)

        assert store.sweep(now=T0 + 10_000_000) == 0
        assert paste.view_count == 0
        assert store.retrieve(paste.id, now=T0).views_remaining == 0

    def test_empty_store(self):
        assert PasteStore().sweep(now=T0) == 0
