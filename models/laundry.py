# models/laundry.py
from datetime import datetime
from typing import Literal, Optional
# Fixed vocabularies of the shop: garment categories, services and the
# order status pipeline. Values are what gets stored in the JSON files.

ItemType = Literal["thobe", "shirt", "suit", "blanket", "jacket", "pants", "dress", "other"]
ServiceType = Literal["wash_iron", "iron_only", "dry_clean"]
OrderStatus = Literal["received", "processing", "ready", "delivered"]

ITEM_TYPES: tuple[str, ...] = ("thobe", "shirt", "suit", "blanket", "jacket", "pants", "dress", "other")
SERVICE_TYPES: tuple[str, ...] = ("wash_iron", "iron_only", "dry_clean")
# pipeline order
ORDER_STATUSES: tuple[str, ...] = ("received", "processing", "ready", "delivered")

ITEM_LABELS_AR = {
    "thobe": "ثوب",
    "shirt": "قميص",
    "suit": "بدلة",
    "blanket": "بطانية",
    "jacket": "جاكيت",
    "pants": "بنطلون",
    "dress": "فستان",
    "other": "أخرى",
}

SERVICE_LABELS_AR = {
    "wash_iron": "غسيل وكوي",
    "iron_only": "كوي فقط",
    "dry_clean": "تنظيف جاف",
}

STATUS_LABELS_AR = {
    "received": "استلم",
    "processing": "قيد المعالجة",
    "ready": "جاهز",
    "delivered": "تم التسليم",
}

ITEM_LABELS_EN = {
    "thobe": "Thobe",
    "shirt": "Shirt",
    "suit": "Suit",
    "blanket": "Blanket",
    "jacket": "Jacket",
    "pants": "Pants",
    "dress": "Dress",
    "other": "Other",
}

SERVICE_LABELS_EN = {
    "wash_iron": "Wash & Iron",
    "iron_only": "Iron Only",
    "dry_clean": "Dry Clean",
}

STATUS_LABELS_EN = {
    "received": "Received",
    "processing": "Processing",
    "ready": "Ready",
    "delivered": "Delivered",
}

LABELS = {
    "ar": {"items": ITEM_LABELS_AR, "services": SERVICE_LABELS_AR, "statuses": STATUS_LABELS_AR},
    "en": {"items": ITEM_LABELS_EN, "services": SERVICE_LABELS_EN, "statuses": STATUS_LABELS_EN},
}


def check_item_type(item_type: str) -> str:
    if item_type not in ITEM_TYPES:
        raise ValueError(f"Unknown item type: {item_type}")
    return item_type


def check_service_type(service_type: str) -> str:
    if service_type not in SERVICE_TYPES:
        raise ValueError(f"Unknown service type: {service_type}")
    return service_type


def check_status(status: str) -> str:
    if status not in ORDER_STATUSES:
        raise ValueError(f"Unknown order status: {status}")
    return status


def check_pickup_date(value: str) -> str:
    # calendar date as stored on orders and in backups: YYYY-MM-DD
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except (TypeError, ValueError):
        raise ValueError(f"Pickup date must be YYYY-MM-DD, got {value!r}") from None
    return value


def timestamp(when: Optional[datetime] = None) -> str:
    # local wall-clock, millisecond precision: 2024-06-15T10:30:00.000
    if when is None:
        when = datetime.now()
    return when.isoformat(timespec="milliseconds")
