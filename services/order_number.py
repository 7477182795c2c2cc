# services/order_number.py
from datetime import datetime
from typing import Optional


def date_prefix(now: datetime) -> str:
    # 2024-06-15 -> "240615"
    return now.strftime("%y%m%d")


class OrderNumberGenerator:
    """
    Hands out human-readable order numbers: YYMMDD-NNNN.

    The sequence is the count of orders already numbered today plus one,
    so it starts again at 0001 every day. Two writers asking at the same
    moment would get the same number; the shop runs a single till.
    """

    def __init__(self, order_store):
        self.order_store = order_store

    def next(self, now: Optional[datetime] = None) -> str:
        # now can be given for testability, otherwise the real clock
        if now is None:
            now = datetime.now()
        prefix = date_prefix(now)
        count = self.order_store.count_by_number_prefix(prefix)
        return f"{prefix}-{count + 1:04d}"
