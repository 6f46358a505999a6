"""Unit tests for cart line items and snapshots."""

import dataclasses

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartLineItem, CartSnapshot
from tests.builders import make_product, make_snapshot


class TestCartLineItem:

    def test_defaults_to_one_unit(self):
        line = CartLineItem(product=make_product())
        assert line.qty == 1

    def test_exposes_product_fields(self):
        product = make_product(7, price="3.25", title="Lipstick")
        line = CartLineItem(product=product, qty=2)
        assert line.id == 7
        assert line.title == "Lipstick"
        assert line.price == product.price

    @pytest.mark.parametrize("qty", [0, -1])
    def test_non_positive_quantity_rejected(self, qty):
        with pytest.raises(ValidationError, match="must be positive"):
            CartLineItem(product=make_product(), qty=qty)

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            CartLineItem(product=make_product(), qty=1.5)

    def test_with_qty_returns_new_line(self):
        line = CartLineItem(product=make_product(), qty=1)
        bumped = line.with_qty(3)
        assert bumped.qty == 3
        assert line.qty == 1

    def test_is_immutable(self):
        line = CartLineItem(product=make_product())
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.qty = 5


class TestCartSnapshot:

    def test_empty_by_default(self):
        snapshot = CartSnapshot()
        assert snapshot.is_empty
        assert len(snapshot) == 0
        assert list(snapshot) == []

    def test_preserves_order(self):
        snapshot = make_snapshot(("1.00", 1), ("2.00", 1), ("3.00", 1))
        assert [item.id for item in snapshot] == [1, 2, 3]
        assert snapshot[1].id == 2

    def test_find(self):
        snapshot = make_snapshot(("1.00", 1), ("2.00", 4))
        assert snapshot.find(2).qty == 4
        assert snapshot.find(99) is None

    def test_cannot_be_mutated(self):
        snapshot = make_snapshot(("1.00", 1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.items = ()
        with pytest.raises(AttributeError):
            snapshot.items.append(None)
