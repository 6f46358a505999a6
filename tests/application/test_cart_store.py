"""Tests for the CartStore mutations and persistence.

Uses an in-memory fake repository — no file I/O.
"""

import pytest

from storefront.application.cart_store import CartStore
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem, CartSnapshot
from storefront.domain.model.value_objects import KHR, Money
from storefront.domain.service import pricing
from tests.builders import make_product
from tests.fakes import FakeCartRepository


def _setup(
    items: list[CartLineItem] | None = None,
    fail_writes: bool = False,
) -> tuple[CartStore, FakeCartRepository]:
    repo = FakeCartRepository(items, fail_writes=fail_writes)
    return CartStore.create(repo), repo


class TestAddToCart:

    def test_new_product_gets_qty_one(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        cart = store.get_cart()
        assert len(cart) == 1
        assert cart[0].qty == 1

    def test_same_product_twice_is_one_line(self):
        store, _ = _setup()
        product = make_product(1)
        store.add_to_cart(product)
        store.add_to_cart(product)
        cart = store.get_cart()
        assert len(cart) == 1
        assert cart[0].qty == 2

    def test_new_products_are_appended_in_order(self):
        store, _ = _setup()
        for product_id in (3, 1, 2):
            store.add_to_cart(make_product(product_id))
        store.add_to_cart(make_product(3))
        assert [item.id for item in store.get_cart()] == [3, 1, 2]

    def test_persists_after_add(self):
        store, repo = _setup()
        store.add_to_cart(make_product(1))
        assert repo.save_count == 1
        assert [item.id for item in repo.stored] == [1]


class TestChangeQty:

    def test_increments_and_decrements(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        store.change_qty(1, 4)
        assert store.get_line(1).qty == 5
        store.change_qty(1, -2)
        assert store.get_line(1).qty == 3

    @pytest.mark.parametrize("delta", [-1, -5])
    def test_dropping_to_zero_or_below_removes_line(self, delta):
        store, repo = _setup()
        store.add_to_cart(make_product(1))
        store.change_qty(1, delta)
        assert store.get_cart().is_empty
        assert repo.stored == []

    def test_unknown_id_is_noop(self):
        store, repo = _setup()
        store.add_to_cart(make_product(1))
        before = store.get_cart()
        saves = repo.save_count

        store.change_qty(99, 3)

        assert store.get_cart() == before
        assert repo.save_count == saves

    def test_cart_never_holds_non_positive_quantity(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        store.add_to_cart(make_product(2))
        for delta in (-1, 2, -3, -1, 1):
            store.change_qty(2, delta)
        assert all(item.qty >= 1 for item in store.get_cart())


class TestRemoveAndClear:

    def test_remove_deletes_line(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        store.add_to_cart(make_product(2))
        store.remove(1)
        assert [item.id for item in store.get_cart()] == [2]

    def test_remove_unknown_id_leaves_cart_unchanged(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        before = store.get_cart()
        store.remove(42)
        assert store.get_cart() == before

    def test_clear_empties_cart_and_storage(self):
        store, repo = _setup()
        store.add_to_cart(make_product(1))
        store.add_to_cart(make_product(2))
        store.clear_cart()
        assert list(store.get_cart()) == []
        assert repo.stored == []
        assert store.is_empty


class TestSnapshotIsolation:

    def test_snapshot_does_not_change_after_mutation(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        snapshot = store.get_cart()
        store.add_to_cart(make_product(1))
        assert snapshot[0].qty == 1
        assert store.get_cart()[0].qty == 2

    def test_snapshot_is_read_only(self):
        store, _ = _setup()
        store.add_to_cart(make_product(1))
        with pytest.raises(AttributeError):
            store.get_cart().items.append(None)


class TestRestore:

    def test_seeds_from_repository(self):
        items = [
            CartLineItem(product=make_product(2), qty=3),
            CartLineItem(product=make_product(1), qty=1),
        ]
        store, _ = _setup(items)
        assert [(item.id, item.qty) for item in store.get_cart()] == [(2, 3), (1, 1)]

    def test_round_trip_reproduces_snapshot(self):
        store, repo = _setup()
        store.add_to_cart(make_product(5, price="1.99"))
        store.add_to_cart(make_product(2, price="10"))
        store.change_qty(5, 2)

        restored = CartStore.create(repo)
        assert restored.get_cart() == store.get_cart()

    def test_duplicate_ids_in_storage_are_merged(self):
        items = [
            CartLineItem(product=make_product(1), qty=2),
            CartLineItem(product=make_product(2), qty=1),
            CartLineItem(product=make_product(1), qty=3),
        ]
        store, _ = _setup(items)
        assert [(item.id, item.qty) for item in store.get_cart()] == [(1, 5), (2, 1)]


class TestWriteFailures:

    def test_write_failure_keeps_in_memory_state(self):
        store, _ = _setup(fail_writes=True)
        store.add_to_cart(make_product(1))
        store.add_to_cart(make_product(1))
        assert store.get_line(1).qty == 2

    def test_write_failure_still_notifies(self):
        store, _ = _setup(fail_writes=True)
        received: list[CartSnapshot] = []
        store.subscribe(received.append)
        store.add_to_cart(make_product(1))
        assert len(received) == 2
        assert received[-1][0].id == 1


class TestLifecycle:

    def test_dispose_detaches_subscribers(self):
        store, _ = _setup()
        received: list[CartSnapshot] = []
        store.subscribe(received.append)
        store.dispose()
        assert store.disposed
        assert len(received) == 1

    def test_mutation_after_dispose_rejected(self):
        store, _ = _setup()
        store.dispose()
        with pytest.raises(ValidationError, match="disposed"):
            store.add_to_cart(make_product(1))


class TestScenario:

    def test_add_twice_then_remove_by_negative_delta(self):
        store, _ = _setup()
        product = make_product(1, price="5")

        store.add_to_cart(product)
        assert store.get_line(1).qty == 1

        store.add_to_cart(product)
        assert store.get_line(1).qty == 2
        assert pricing.total_usd(store.get_cart()) == Money.of("10")

        store.change_qty(1, -5)
        assert store.get_cart().is_empty
        assert pricing.total_khr(store.get_cart()) == Money.of("0", KHR)
