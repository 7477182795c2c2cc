# services/order_store.py
import logging
from datetime import date, datetime
from typing import Optional, Union

from models.laundry import check_status, timestamp
from models.order import Order

logger = logging.getLogger("laundry.orders")

DateLike = Union[str, date, datetime]


def parse_timestamp(value: str) -> datetime:
    # Timestamps are local wall-clock time. Zone-aware values (e.g. "...Z"
    # from older backups) are converted to local time first.
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return parse_timestamp(value.isoformat())
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return parse_timestamp(value)


def _newest_first(orders: list[Order]) -> list[Order]:
    return sorted(orders, key=lambda o: parse_timestamp(o.created_at), reverse=True)


class OrderStore:
    # Saved orders. The store trusts the caller: orders arrive validated,
    # with id and order number already assigned.

    def __init__(self, repo):
        self.repo = repo

    def _load(self) -> list[Order]:
        return [Order.from_dict(o) for o in self.repo.get_orders()]

    def add(self, order: Order) -> Order:
        with self.repo.lock:
            orders = self.repo.get_orders()
            orders.append(order.to_dict())
            self.repo.save_orders(orders)
        logger.info("Order %s saved for %s (total %s)",
                    order.order_number, order.customer_name, order.total_amount)
        return order

    def get(self, order_id: str) -> Optional[Order]:
        for o in self.repo.get_orders():
            if o.get("id") == order_id:
                return Order.from_dict(o)
        return None

    def update_status(self, order_id: str, new_status: str) -> bool:
        # Any status may be set from any other; the counter staff can
        # move an order back if it was advanced by mistake.
        check_status(new_status)
        with self.repo.lock:
            orders = self.repo.get_orders()
            for o in orders:
                if o.get("id") == order_id:
                    old_status = o.get("status")
                    o["status"] = new_status
                    o["updatedAt"] = timestamp()
                    break
            else:
                logger.debug("No order with id %s", order_id)
                return False

            self.repo.save_orders(orders)
        logger.info("Order %s: %s -> %s", order_id, old_status, new_status)
        return True

    def list_all(self) -> list[Order]:
        return _newest_first(self._load())

    def query_by_status(self, status: str) -> list[Order]:
        check_status(status)
        return _newest_first([o for o in self._load() if o.status == status])

    def query_by_date_range(self, start: DateLike, end: DateLike, end_inclusive: bool = True) -> list[Order]:
        # Compared against created_at. The start is always included; pass
        # end_inclusive=False for a half-open [start, end) range.
        start_dt = _as_datetime(start)
        end_dt = _as_datetime(end)

        def in_range(o: Order) -> bool:
            created = parse_timestamp(o.created_at)
            if end_inclusive:
                return start_dt <= created <= end_dt
            return start_dt <= created < end_dt

        return _newest_first(list(filter(in_range, self._load())))

    def query_by_pickup_date(self, pickup_date: DateLike) -> list[Order]:
        if isinstance(pickup_date, (date, datetime)):
            pickup_date = pickup_date.strftime("%Y-%m-%d")
        return _newest_first([o for o in self._load() if o.pickup_date == pickup_date])

    def count_by_number_prefix(self, prefix: str) -> int:
        return sum(1 for o in self.repo.get_orders()
                   if str(o.get("orderNumber", "")).startswith(prefix))
