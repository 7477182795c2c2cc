# services/price_catalog.py
import logging
import uuid
from typing import Optional

from models.laundry import SERVICE_TYPES, check_item_type, check_service_type, timestamp
from models.service_price import ServicePrice

logger = logging.getLogger("laundry.prices")

# Price used when a pair has no row in the price list.
FALLBACK_PRICE = 5

# Starting price list: item type -> (wash & iron, iron only, dry clean).
# Blankets are not ironed alone, the row still exists with price 0.
DEFAULT_PRICES = {
    "thobe":   (5, 3, 8),
    "shirt":   (3, 2, 5),
    "suit":    (15, 10, 25),
    "blanket": (25, 0, 40),
    "jacket":  (8, 5, 15),
    "pants":   (4, 2, 6),
    "dress":   (10, 6, 18),
    "other":   (5, 3, 10),
}


class PriceCatalog:
    def __init__(self, repo, fallback_price: float = FALLBACK_PRICE):
        self.repo = repo
        self.fallback_price = fallback_price

    def list_prices(self) -> list[ServicePrice]:
        prices = []
        for row in self.repo.get_service_prices():
            try:
                prices.append(ServicePrice.from_dict(row))
            except (KeyError, TypeError, AttributeError) as e:
                # a damaged row is left out, the rest of the list still prices
                logger.warning("Skipping malformed service price row %r: %s", row, e)
        return prices

    def initialize_defaults(self) -> int:
        # Seed the price list on first run. Returns how many rows were added.
        with self.repo.lock:
            if self.repo.get_service_prices():
                return 0

            now = timestamp()
            rows = []
            for item_type, prices in DEFAULT_PRICES.items():
                for service_type, price in zip(SERVICE_TYPES, prices):
                    rows.append(ServicePrice(
                        id=uuid.uuid4().hex,
                        item_type=item_type,
                        service_type=service_type,
                        price=price,
                        created_at=now,
                        updated_at=now,
                    ).to_dict())

            self.repo.save_service_prices(rows)
        logger.info("Seeded %d default service prices", len(rows))
        return len(rows)

    def find(self, item_type: str, service_type: str) -> Optional[ServicePrice]:
        for p in self.list_prices():
            if p.item_type == item_type and p.service_type == service_type:
                return p
        return None

    def get_price(self, item_type: str, service_type: str) -> float:
        row = self.find(item_type, service_type)
        if row is None:
            return self.fallback_price
        return row.price

    def price_map(self) -> dict[tuple[str, str], float]:
        return {p.key: p.price for p in self.list_prices()}

    def update_price(self, price_id: str, new_price: float) -> bool:
        if new_price < 0:
            raise ValueError("The price cannot be negative.")

        with self.repo.lock:
            rows = self.repo.get_service_prices()
            for row in rows:
                if isinstance(row, dict) and row.get("id") == price_id:
                    row["price"] = new_price
                    row["updatedAt"] = timestamp()
                    break
            else:
                # unknown id: nothing to update
                logger.debug("No service price with id %s", price_id)
                return False

            self.repo.save_service_prices(rows)
        logger.info("Price %s set to %s", price_id, new_price)
        return True

    def set_price(self, item_type: str, service_type: str, new_price: float) -> bool:
        # Resolve the row for the pair first, then update it by id.
        check_item_type(item_type)
        check_service_type(service_type)
        row = self.find(item_type, service_type)
        if row is None:
            logger.debug("No service price for %s/%s", item_type, service_type)
            return False
        return self.update_price(row.id, new_price)
