# services/receipt_service.py
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from models.laundry import LABELS
from models.order import Order

# VAT is added when the receipt is printed, it is never stored on the order.
VAT_RATE = Decimal("0.15")


def vat_for(subtotal: float) -> int:
    # whole currency units, halves rounded up
    return int((Decimal(str(subtotal)) * VAT_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass
class ReceiptLine:
    label: str
    quantity: int
    line_total: float


@dataclass
class Receipt:
    order_number: str
    customer_name: str
    phone_number: str
    created_at: str
    pickup_date: str
    lines: list[ReceiptLine]
    subtotal: float
    vat: int
    total: float


def build_receipt(order: Order, lang: str = "ar") -> Receipt:
    labels = LABELS[lang]
    lines = [
        ReceiptLine(
            label=f"{labels['items'][it.item_type]} - {labels['services'][it.service_type]}",
            quantity=it.quantity,
            line_total=it.subtotal,
        )
        for it in order.items
    ]
    subtotal = order.total_amount
    vat = vat_for(subtotal)
    return Receipt(
        order_number=order.order_number,
        customer_name=order.customer_name,
        phone_number=order.phone_number,
        created_at=order.created_at,
        pickup_date=order.pickup_date,
        lines=lines,
        subtotal=subtotal,
        vat=vat,
        total=subtotal + vat,
    )


def _amount(value) -> str:
    return f"{value:g}"


def render_text(receipt: Receipt, width: int = 32) -> str:
    # Plain text for 58mm thermal printers.
    sep = "-" * width
    out = [
        f"#{receipt.order_number}",
        receipt.customer_name,
        receipt.phone_number,
        receipt.created_at[:16].replace("T", " "),
        sep,
    ]
    for line in receipt.lines:
        left = f"{line.label} ({line.quantity}x)"
        right = _amount(line.line_total)
        out.append(left + right.rjust(max(1, width - len(left))))
    out.append(sep)
    for name, value in (("Subtotal", receipt.subtotal), ("VAT 15%", receipt.vat), ("Total", receipt.total)):
        out.append(name + _amount(value).rjust(width - len(name)))
    out.append(f"Pickup: {receipt.pickup_date}")
    return "\n".join(out)
