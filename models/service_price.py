# models/service_price.py
from dataclasses import dataclass
from typing import Any
# One row of the price list: price of a service for an item type.
# (item_type, service_type) is unique across the table.

@dataclass
class ServicePrice:
    id: str
    item_type: str
    service_type: str
    price: float
    created_at: str
    updated_at: str

    @property
    def key(self) -> tuple[str, str]:
        return (self.item_type, self.service_type)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "itemType": self.item_type,
            "serviceType": self.service_type,
            "price": self.price,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ServicePrice":
        return cls(
            id=data["id"],
            item_type=data["itemType"],
            service_type=data["serviceType"],
            price=data["price"],
            created_at=data["createdAt"],
            updated_at=data["updatedAt"],
        )
