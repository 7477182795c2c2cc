# services/report_service.py
from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from typing import Union

from models.laundry import ORDER_STATUSES
# report_service.py is a service module (Service Layer)
# with the class name ReportService, responsible for the daily figures
# shown on the reports screen.


@dataclass
class DailyReport:
    date: str
    total_revenue: float = 0
    total_orders: int = 0
    pending_orders: int = 0
    pieces_processed: int = 0
    orders_by_status: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "totalRevenue": self.total_revenue,
            "totalOrders": self.total_orders,
            "pendingOrders": self.pending_orders,
            "piecesProcessed": self.pieces_processed,
            "ordersByStatus": dict(self.orders_by_status),
        }


def day_window(day: Union[str, date, datetime]) -> tuple[datetime, datetime]:
    # Local wall-clock bounds of a calendar day as a half-open range:
    # [00:00 that day, 00:00 the next day). Every instant up to
    # 23:59:59.999999 belongs to the day.
    if isinstance(day, datetime):
        day = day.date()
    elif isinstance(day, str):
        day = date.fromisoformat(day[:10])
    start = datetime.combine(day, time(0, 0, 0, 0))
    end = start + timedelta(days=1)
    return start, end


class ReportService:
    def __init__(self, order_store):
        self.order_store = order_store

    def daily_report(self, day: Union[str, date, datetime]) -> DailyReport:
        # This method returns the figures for one calendar day.
        # Every number is recomputed from the orders created that day;
        # nothing is cached or written back.
        start, end = day_window(day)
        orders = self.order_store.query_by_date_range(start, end, end_inclusive=False)

        revenue = sum(o.total_amount for o in orders)
        pending = sum(1 for o in orders if o.status != "delivered")
        pieces = sum(o.pieces for o in orders)

        # every status is reported, even with no orders in it
        counter = Counter({status: 0 for status in ORDER_STATUSES})
        counter.update(o.status for o in orders)

        return DailyReport(
            date=start.date().isoformat(),
            total_revenue=revenue,
            total_orders=len(orders),
            pending_orders=pending,
            pieces_processed=pieces,
            orders_by_status={status: counter[status] for status in ORDER_STATUSES},
        )
