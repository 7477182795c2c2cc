# services/checkout_service.py

import uuid
from datetime import datetime
from typing import Optional

from models.draft import DraftOrder
from models.laundry import timestamp
from models.order import Order, OrderItem


class OrderValidationError(ValueError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing or invalid order fields: {', '.join(missing)}")


class CheckoutService:
    def __init__(self, order_store, number_generator, price_catalog):
        self.orders = order_store
        self.numbers = number_generator
        self.prices = price_catalog

    def add_item(self, draft: DraftOrder, item_type: str, service_type: str) -> OrderItem:
        # The unit price is copied from the price list now; later price
        # edits do not change items already on the draft.
        price = self.prices.get_price(item_type, service_type)
        return draft.add_quick_item(item_type, service_type, price)

    def commit(self, draft: DraftOrder, now: Optional[datetime] = None) -> Order:
        # Validate required fields before anything is written
        missing = draft.missing_fields()
        if missing:
            raise OrderValidationError(missing)

        if now is None:
            now = datetime.now()
        stamp = timestamp(now)

        # Persist order
        order = Order(
            id=uuid.uuid4().hex,
            order_number=self.numbers.next(now),
            customer_name=draft.customer_name.strip(),
            phone_number=draft.phone_number.strip(),
            pickup_date=draft.pickup_date,
            created_at=stamp,
            updated_at=stamp,
            status="received",
            items=[OrderItem(it.item_type, it.service_type, it.unit_price, it.quantity)
                   for it in draft.items],
            notes=draft.notes or None,
        )
        self.orders.add(order)

        # Clear draft
        draft.clear()

        return order
