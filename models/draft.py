# models/draft.py
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from models.laundry import check_item_type, check_pickup_date, check_service_type
from models.order import OrderItem, sum_items
# Draft order: the order being assembled at the counter, before it is saved.

def _today() -> str:
    return date.today().isoformat()


@dataclass
class DraftOrder:
    customer_name: str = ""
    phone_number: str = ""
    pickup_date: str = field(default_factory=_today)
    notes: Optional[str] = None
    items: list[OrderItem] = field(default_factory=list)

    @property
    def total_amount(self) -> float:
        return sum_items(self.items)

    def add_quick_item(self, item_type: str, service_type: str, unit_price: float) -> OrderItem:
        check_item_type(item_type)
        check_service_type(service_type)
        if unit_price < 0:
            raise ValueError("The price cannot be negative.")
        item = OrderItem(item_type, service_type, unit_price, 1)
        self.items.append(item)
        return item

    def remove_item(self, index: int) -> None:
        del self.items[index]

    def update_quantity(self, index: int, delta: int) -> int:
        item = self.items[index]
        item.quantity = max(1, item.quantity + delta)
        return item.quantity

    def missing_fields(self) -> list[str]:
        missing = []
        if not self.customer_name.strip():
            missing.append("customer_name")
        if not self.phone_number.strip():
            missing.append("phone_number")
        if not self.items:
            missing.append("items")
        try:
            check_pickup_date(self.pickup_date)
        except ValueError:
            missing.append("pickup_date")
        return missing

    def clear(self):
        self.customer_name = ""
        self.phone_number = ""
        self.pickup_date = _today()
        self.notes = None
        self.items.clear()
