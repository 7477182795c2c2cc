from datetime import datetime

import pytest

from models.draft import DraftOrder
from services.checkout_service import OrderValidationError

NOW = datetime(2024, 6, 15, 10, 30)


@pytest.fixture
def draft():
    return DraftOrder(customer_name="Ahmed", phone_number="0501234567", pickup_date="2024-06-17")


class TestAddItem:

    def test_uses_catalog_price(self, checkout, catalog, draft):
        catalog.initialize_defaults()
        item = checkout.add_item(draft, "suit", "dry_clean")
        assert item.unit_price == 25
        assert draft.total_amount == 25

    def test_falls_back_without_catalog(self, checkout, draft):
        item = checkout.add_item(draft, "suit", "dry_clean")
        assert item.unit_price == 5

    def test_price_is_a_snapshot(self, checkout, catalog, draft):
        catalog.initialize_defaults()
        checkout.add_item(draft, "shirt", "wash_iron")
        catalog.set_price("shirt", "wash_iron", 9)

        order = checkout.commit(draft, now=NOW)
        assert order.items[0].unit_price == 3
        assert order.total_amount == 3


class TestCommit:

    def test_saves_order(self, checkout, catalog, store, draft):
        catalog.initialize_defaults()
        checkout.add_item(draft, "thobe", "wash_iron")
        checkout.add_item(draft, "suit", "dry_clean")
        draft.update_quantity(0, 2)
        draft.notes = "starch collars"

        order = checkout.commit(draft, now=NOW)

        assert order.order_number == "240615-0001"
        assert order.status == "received"
        assert order.customer_name == "Ahmed"
        assert order.pickup_date == "2024-06-17"
        assert order.created_at == order.updated_at == "2024-06-15T10:30:00.000"
        assert order.total_amount == 3 * 5 + 25
        assert order.notes == "starch collars"
        assert store.get(order.id) == order

    def test_clears_draft(self, checkout, draft):
        checkout.add_item(draft, "thobe", "wash_iron")
        checkout.commit(draft, now=NOW)
        assert draft.items == []
        assert draft.customer_name == ""

    def test_numbers_follow_on(self, checkout, draft):
        first = None
        for _ in range(3):
            draft.customer_name = "Ahmed"
            draft.phone_number = "0501234567"
            checkout.add_item(draft, "other", "iron_only")
            order = checkout.commit(draft, now=NOW)
            first = first or order
        assert first.order_number == "240615-0001"
        assert order.order_number == "240615-0003"

    def test_ids_are_unique(self, checkout, draft, store):
        for _ in range(3):
            draft.customer_name = "Ahmed"
            draft.phone_number = "0501234567"
            checkout.add_item(draft, "other", "iron_only")
            checkout.commit(draft, now=NOW)
        assert len({o.id for o in store.list_all()}) == 3

    @pytest.mark.parametrize("field,value,missing", [
        ("customer_name", "", "customer_name"),
        ("phone_number", " ", "phone_number"),
    ])
    def test_missing_field_rejected(self, checkout, store, draft, field, value, missing):
        checkout.add_item(draft, "thobe", "wash_iron")
        setattr(draft, field, value)

        with pytest.raises(OrderValidationError) as exc:
            checkout.commit(draft, now=NOW)

        assert exc.value.missing == [missing]
        assert store.list_all() == []
        # draft kept so the user can fix it
        assert len(draft.items) == 1

    def test_empty_order_rejected(self, checkout, store, draft):
        with pytest.raises(ValueError):
            checkout.commit(draft, now=NOW)
        assert store.list_all() == []

    @pytest.mark.parametrize("pickup", ["2024/06/20", "20-06-2024", "tomorrow", ""])
    def test_bad_pickup_date_rejected(self, checkout, store, draft, pickup):
        checkout.add_item(draft, "thobe", "wash_iron")
        draft.pickup_date = pickup

        with pytest.raises(OrderValidationError) as exc:
            checkout.commit(draft, now=NOW)

        assert exc.value.missing == ["pickup_date"]
        assert store.list_all() == []

    def test_saved_orders_always_restore(self, checkout, backup, store, draft):
        checkout.add_item(draft, "thobe", "wash_iron")
        draft.pickup_date = "2024-06-20"
        order = checkout.commit(draft, now=NOW)

        backup.import_snapshot(backup.export_snapshot())
        assert store.list_all() == [order]
