import argparse
import json
import logging
import sys
from typing import Optional

from utils.config import AppConfig, load_config
from utils.logger import setup_logger
from data.repository import DataRepository
from models.draft import DraftOrder
from models.laundry import ITEM_TYPES, ORDER_STATUSES, SERVICE_TYPES, check_pickup_date
from services.price_catalog import PriceCatalog
from services.order_store import OrderStore
from services.order_number import OrderNumberGenerator
from services.checkout_service import CheckoutService
from services.report_service import ReportService
from services.backup_service import BackupError, BackupService
from services.receipt_service import build_receipt, render_text


class LaundryApp:
    # Builds every engine component once at startup and hands each its
    # collaborators. Whatever drives the shop (screens, CLI) goes through
    # this object.

    def __init__(self, config: AppConfig, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger or logging.getLogger("laundry")

        self.repo = DataRepository(config.storage_dir)
        self.prices = PriceCatalog(self.repo, fallback_price=config.fallback_price)
        self.orders = OrderStore(self.repo)
        self.numbers = OrderNumberGenerator(self.orders)
        self.checkout = CheckoutService(self.orders, self.numbers, self.prices)
        self.reports = ReportService(self.orders)
        self.backup = BackupService(self.repo)

        # One draft order in memory
        self.draft = DraftOrder()

    def start(self):
        self.prices.initialize_defaults()
        return self


def _cmd_init(app, args):
    added = app.prices.initialize_defaults()
    print(f"{added} default prices added" if added else "Price list already set up")


def _cmd_prices(app, args):
    for p in sorted(app.prices.list_prices(), key=lambda p: p.key):
        print(f"{p.item_type:<8} {p.service_type:<10} {p.price:g}")


def _cmd_set_price(app, args):
    if not app.prices.set_price(args.item_type, args.service_type, args.price):
        print("No such price entry")


def _cmd_new_order(app, args):
    draft = app.draft
    draft.customer_name = args.customer
    draft.phone_number = args.phone
    if args.pickup:
        draft.pickup_date = args.pickup
    draft.notes = args.notes
    for entry in args.item:
        # thobe:wash_iron[:qty]
        parts = entry.split(":")
        if len(parts) not in (2, 3):
            raise ValueError(f"Bad item '{entry}', expected ITEM:SERVICE[:QTY]")
        app.checkout.add_item(draft, parts[0], parts[1])
        if len(parts) == 3:
            draft.update_quantity(len(draft.items) - 1, int(parts[2]) - 1)
    order = app.checkout.commit(draft)
    print(render_text(build_receipt(order, args.lang)))


def _cmd_orders(app, args):
    if args.status:
        orders = app.orders.query_by_status(args.status)
    elif args.pickup:
        orders = app.orders.query_by_pickup_date(args.pickup)
    else:
        orders = app.orders.list_all()
    for o in orders:
        print(f"{o.order_number}  {o.status:<10} {o.customer_name:<20} {o.total_amount:g}  pickup {o.pickup_date}  [{o.id}]")


def _cmd_status(app, args):
    if not app.orders.update_status(args.order_id, args.status):
        print("No such order")


def _cmd_report(app, args):
    print(json.dumps(app.reports.daily_report(args.date).to_dict(), indent=2, ensure_ascii=False))


def _cmd_backup(app, args):
    path = app.backup.export_to_file(args.directory or app.config.backup_dir)
    print(path)


def _cmd_restore(app, args):
    app.backup.import_from_file(args.path)
    print("Data restored")


def _pickup_date(value: str) -> str:
    try:
        return check_pickup_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="laundry", description="Laundry shop point of sale")
    parser.add_argument("--config", help="path to a JSON config file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init", help="seed the default price list").set_defaults(func=_cmd_init)
    sub.add_parser("prices", help="show the price list").set_defaults(func=_cmd_prices)

    p = sub.add_parser("set-price", help="change one price")
    p.add_argument("item_type", choices=ITEM_TYPES)
    p.add_argument("service_type", choices=SERVICE_TYPES)
    p.add_argument("price", type=float)
    p.set_defaults(func=_cmd_set_price)

    p = sub.add_parser("new-order", help="save an order and print its receipt")
    p.add_argument("--customer", required=True)
    p.add_argument("--phone", required=True)
    p.add_argument("--pickup", type=_pickup_date, help="YYYY-MM-DD, defaults to today")
    p.add_argument("--notes")
    p.add_argument("--item", action="append", default=[], help="ITEM:SERVICE[:QTY], repeatable")
    p.add_argument("--lang", choices=("ar", "en"), default="ar")
    p.set_defaults(func=_cmd_new_order)

    p = sub.add_parser("orders", help="list orders")
    p.add_argument("--status", choices=ORDER_STATUSES)
    p.add_argument("--pickup", type=_pickup_date, help="YYYY-MM-DD")
    p.set_defaults(func=_cmd_orders)

    p = sub.add_parser("status", help="change an order's status")
    p.add_argument("order_id")
    p.add_argument("status", choices=ORDER_STATUSES)
    p.set_defaults(func=_cmd_status)

    p = sub.add_parser("report", help="daily figures")
    p.add_argument("date", help="YYYY-MM-DD")
    p.set_defaults(func=_cmd_report)

    p = sub.add_parser("backup", help="export everything to a JSON file")
    p.add_argument("directory", nargs="?")
    p.set_defaults(func=_cmd_backup)

    p = sub.add_parser("restore", help="replace everything with a backup file")
    p.add_argument("path")
    p.set_defaults(func=_cmd_restore)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    logger = setup_logger(config.log_dir, config.log_level, keep_days=config.log_keep_days)

    app = LaundryApp(config, logger)
    if args.command != "init":
        app.start()

    try:
        args.func(app, args)
    except (ValueError, BackupError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
