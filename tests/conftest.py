import pytest

from data.repository import DataRepository
from models.order import Order, OrderItem
from services.backup_service import BackupService
from services.checkout_service import CheckoutService
from services.order_number import OrderNumberGenerator
from services.order_store import OrderStore
from services.price_catalog import PriceCatalog
from services.report_service import ReportService


@pytest.fixture
def repo(tmp_path):
    return DataRepository(tmp_path / "storage")


@pytest.fixture
def catalog(repo):
    return PriceCatalog(repo)


@pytest.fixture
def store(repo):
    return OrderStore(repo)


@pytest.fixture
def numbers(store):
    return OrderNumberGenerator(store)


@pytest.fixture
def checkout(store, numbers, catalog):
    return CheckoutService(store, numbers, catalog)


@pytest.fixture
def reports(store):
    return ReportService(store)


@pytest.fixture
def backup(repo):
    return BackupService(repo)


@pytest.fixture
def make_order():
    """Build an Order without going through checkout"""
    counter = {"n": 0}

    def _make(created_at="2024-06-15T10:00:00", status="received", items=None,
              pickup_date="2024-06-17", customer_name="Ahmed", order_number=None):
        counter["n"] += 1
        n = counter["n"]
        if items is None:
            items = [OrderItem("shirt", "wash_iron", 3, 1)]
        return Order(
            id=f"order-{n}",
            order_number=order_number or f"240615-{n:04d}",
            customer_name=customer_name,
            phone_number="0500000000",
            pickup_date=pickup_date,
            created_at=created_at,
            updated_at=created_at,
            status=status,
            items=items,
        )

    return _make
