# data/repository.py
import json
import logging
import os
import tempfile
import threading
from pathlib import Path

logger = logging.getLogger("laundry.repository")

# Orders and the price list share one file, so a restore that replaces
# both lands on disk in a single rename.
SHOP_FILE = "shop.json"
ORDERS = "orders"
PRICES = "servicePrices"


class DataRepository:
    def __init__(self, storage_dir="data/storage"):
        # base folder where the shop data lives
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        # one writer at a time; read-modify-write happens under it
        self.lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self.storage_dir / SHOP_FILE

    def _read_json(self):
        # Load JSON from disk. If the file does not exist or is empty/bad,
        # return None and let the caller start from empty collections.
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return None
                return json.loads(text)
        except (OSError, json.JSONDecodeError) as e:
            # corrupted or unreadable -> fail safe
            logger.warning("Could not read %s, treating it as empty: %s", self.path, e)
            return None

    def _write_json(self, data) -> None:
        # Save data pretty-printed. The file is swapped in whole so a
        # reader sees either the old or the new content.
        fd, tmp = tempfile.mkstemp(dir=self.storage_dir, prefix=f".{SHOP_FILE}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise

    def _load(self) -> dict:
        data = self._read_json()
        if data is None:
            return {ORDERS: [], PRICES: []}
        if not isinstance(data, dict):
            logger.warning("%s does not hold an object, treating it as empty", self.path)
            return {ORDERS: [], PRICES: []}

        shop = {}
        for key in (ORDERS, PRICES):
            rows = data.get(key, [])
            if not isinstance(rows, list):
                # wrong shape for one collection, recover gracefully
                logger.warning("%s in %s is not a list, treating it as empty", key, self.path)
                rows = []
            shop[key] = rows
        return shop

    def _save(self, key: str, rows: list[dict]) -> None:
        with self.lock:
            shop = self._load()
            shop[key] = rows
            self._write_json(shop)

    def get_orders(self) -> list[dict]:
        with self.lock:
            return self._load()[ORDERS]

    def save_orders(self, orders: list[dict]) -> None:
        self._save(ORDERS, orders)

    def get_service_prices(self) -> list[dict]:
        with self.lock:
            return self._load()[PRICES]

    def save_service_prices(self, prices: list[dict]) -> None:
        self._save(PRICES, prices)

    def replace_all(self, orders: list[dict], prices: list[dict]) -> None:
        # Clear and repopulate both collections in one write. Until the
        # rename the old file stays in place untouched.
        with self.lock:
            self._write_json({ORDERS: orders, PRICES: prices})
