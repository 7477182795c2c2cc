# data/schemas.py
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from models.laundry import ItemType, OrderStatus, ServiceType, check_pickup_date

# Shape of a backup file. A restore is checked against these models
# before anything on disk is touched.

BACKUP_VERSION = "1.0"


def _check_timestamp(value: str) -> str:
    datetime.fromisoformat(value)
    return value


class OrderItemRow(BaseModel):
    """One line of an order"""
    model_config = ConfigDict(extra="ignore")

    itemType: ItemType
    serviceType: ServiceType
    # older backups call it "price"
    unitPrice: float = Field(..., ge=0, validation_alias=AliasChoices("unitPrice", "price"))
    quantity: int = Field(..., ge=1)


class OrderRow(BaseModel):
    """A saved order"""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    orderNumber: str = Field(..., min_length=1)
    customerName: str = Field(..., min_length=1)
    phoneNumber: str = Field(..., min_length=1)
    items: List[OrderItemRow] = Field(..., min_length=1)
    totalAmount: Optional[float] = None
    pickupDate: str
    status: OrderStatus
    notes: Optional[str] = None
    createdAt: str
    updatedAt: str

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def timestamps_parse(cls, v: str) -> str:
        return _check_timestamp(v)

    @field_validator("pickupDate")
    @classmethod
    def pickup_is_date(cls, v: str) -> str:
        return check_pickup_date(v)


class ServicePriceRow(BaseModel):
    """A price list row"""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    itemType: ItemType
    serviceType: ServiceType
    price: float = Field(..., ge=0)
    createdAt: str
    updatedAt: str

    @field_validator("createdAt", "updatedAt")
    @classmethod
    def timestamps_parse(cls, v: str) -> str:
        return _check_timestamp(v)


class BackupData(BaseModel):
    """Full snapshot of the shop data"""
    orders: List[OrderRow]
    servicePrices: List[ServicePriceRow]
    backupDate: str
    version: Literal["1.0"]

    @field_validator("backupDate")
    @classmethod
    def backup_date_parses(cls, v: str) -> str:
        return _check_timestamp(v)

    @model_validator(mode="after")
    def one_price_per_pair(self) -> "BackupData":
        seen = set()
        for row in self.servicePrices:
            key = (row.itemType, row.serviceType)
            if key in seen:
                raise ValueError(f"Duplicate price for {key[0]}/{key[1]}")
            seen.add(key)
        return self
