# services/backup_service.py
"""
backup_service.py

Export and restore of everything the shop has stored: orders and the
price list, written as one JSON document.

Restore is all or nothing. The whole document is validated first; if any
part of it is wrong the stored data is left exactly as it was. Only then
are both collections cleared and refilled, under the repository lock.

Backup file layout:
    {
      "orders": [...],
      "servicePrices": [...],
      "backupDate": "2024-06-15T18:30:00.123",
      "version": "1.0"
    }
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from data.schemas import BACKUP_VERSION, BackupData
from models.laundry import timestamp
from models.order import Order
from models.service_price import ServicePrice

logger = logging.getLogger("laundry.backup")


class BackupError(Exception):
    """The backup could not be read or does not have the expected shape."""


def backup_filename(when: datetime) -> str:
    return f"laundry-backup-{when.strftime('%Y-%m-%d')}.json"


class BackupService:
    def __init__(self, repo):
        self.repo = repo

    def export_snapshot(self) -> Dict[str, Any]:
        with self.repo.lock:
            orders = self.repo.get_orders()
            prices = self.repo.get_service_prices()
        return {
            "orders": orders,
            "servicePrices": prices,
            "backupDate": timestamp(),
            "version": BACKUP_VERSION,
        }

    def import_snapshot(self, data: Any) -> None:
        try:
            backup = BackupData.model_validate(data)
        except ValidationError as e:
            logger.error("Backup rejected: %d problem(s) found", e.error_count())
            raise BackupError(f"Invalid backup data: {e}") from e

        # normalise through the domain models so stored rows share one layout
        orders = [Order.from_dict(o.model_dump()).to_dict() for o in backup.orders]
        prices = [ServicePrice.from_dict(p.model_dump()).to_dict() for p in backup.servicePrices]

        self.repo.replace_all(orders, prices)
        logger.info("Restored %d orders and %d prices from backup of %s",
                    len(orders), len(prices), backup.backupDate)

    def export_to_file(self, directory) -> Path:
        snapshot = self.export_snapshot()
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / backup_filename(datetime.fromisoformat(snapshot["backupDate"]))
        with open(path, "w", encoding="utf-8") as f:
            json.dump(snapshot, f, indent=2, ensure_ascii=False)
        logger.info("Backup written to %s", path)
        return path

    def import_from_file(self, path) -> None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not read backup %s: %s", path, e)
            raise BackupError(f"Could not read backup file {path}") from e
        self.import_snapshot(data)
