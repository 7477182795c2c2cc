# models/order.py
from dataclasses import dataclass, field
from typing import Any, Optional
# Order model representing a committed laundry order.
# Stored as camelCase dicts, the same keys the backup file carries.

@dataclass
class OrderItem:
    item_type: str
    service_type: str
    unit_price: float
    quantity: int = 1

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "itemType": self.item_type,
            "serviceType": self.service_type,
            "unitPrice": self.unit_price,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderItem":
        # older files call the snapshot price "price"
        unit_price = data["unitPrice"] if "unitPrice" in data else data["price"]
        return cls(
            item_type=data["itemType"],
            service_type=data["serviceType"],
            unit_price=unit_price,
            quantity=int(data.get("quantity", 1)),
        )


def sum_items(items: list[OrderItem]) -> float:
    return sum(it.unit_price * it.quantity for it in items)


@dataclass
class Order:
    id: str
    order_number: str
    customer_name: str
    phone_number: str
    pickup_date: str
    created_at: str
    updated_at: str
    status: str = "received"
    items: list[OrderItem] = field(default_factory=list)
    notes: Optional[str] = None

    @property
    def total_amount(self) -> float:
        # derived, never stored independently of the items
        return sum_items(self.items)

    @property
    def pieces(self) -> int:
        return sum(it.quantity for it in self.items)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "orderNumber": self.order_number,
            "customerName": self.customer_name,
            "phoneNumber": self.phone_number,
            "items": [it.to_dict() for it in self.items],
            "totalAmount": self.total_amount,
            "pickupDate": self.pickup_date,
            "status": self.status,
            "notes": self.notes,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Order":
        return cls(
            id=data["id"],
            order_number=data["orderNumber"],
            customer_name=data["customerName"],
            phone_number=data["phoneNumber"],
            pickup_date=data["pickupDate"],
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
            status=data.get("status", "received"),
            items=[OrderItem.from_dict(it) for it in data.get("items", [])],
            notes=data.get("notes"),
        )
