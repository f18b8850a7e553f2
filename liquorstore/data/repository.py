# data/repository.py
import json
import threading
from pathlib import Path

from liquorstore.utils.logger import get_logger

logger = get_logger("repository")

DEFAULT_SETTINGS = {
    "storeName": "",
    "contactEmail": "",
    "businessHours": {"open": "10:00", "close": "21:00"},
    "defaultTax": 0,
    "maxItemsAllowed": 7,
}


class DataRepository:
    # JSON-file stand-in for the hosted document store.
    # Collections: orders.json, products.json, users.json (lists of records
    # carrying an "id") and settings.json (a single object).

    def __init__(self, storage_dir: str | Path = "data/storage"):
        # base folder where all JSON data lives
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        # serialises read-modify-write on users.json and orders.json
        self._lock = threading.Lock()

    def _file_path(self, filename: str) -> Path:
        return self.storage_dir / filename

    def _read_json(self, filename: str, default):
        # Load JSON from disk. If the file does not exist or is empty/bad,
        # return the caller's default ([] for collections, {} for settings).
        path = self._file_path(filename)
        if not path.exists():
            return default
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read().strip()
                if text == "":
                    return default
                data = json.loads(text)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"unreadable {filename}, treating as empty: {e}")
            return default
        return data if isinstance(data, type(default)) else default

    def _write_json(self, filename: str, data) -> None:
        #Save Python data structure back to JSON file with pretty formatting.
        path = self._file_path(filename)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)

    # settings

    def get_store_settings(self) -> dict:
        # Missing keys fall back to DEFAULT_SETTINGS.
        data = self._read_json("settings.json", {})
        return {key: data.get(key, default) for key, default in DEFAULT_SETTINGS.items()}

    def save_store_settings(self, settings: dict) -> None:
        self._write_json("settings.json", settings)

    # collections

    def get_all_products(self) -> list[dict]:
        return self._read_json("products.json", [])

    def save_products(self, products: list[dict]) -> None:
        self._write_json("products.json", products)

    def get_all_orders(self) -> list[dict]:
        return self._read_json("orders.json", [])

    def create_order(self, record: dict) -> str:
        with self._lock:
            orders = self.get_all_orders()
            order_id = f"ORD-{len(orders)+1:06d}"
            orders.append({"id": order_id, **record})
            self._write_json("orders.json", orders)
        return order_id

    def save_orders(self, orders: list[dict]) -> None:
        self._write_json("orders.json", orders)

    def get_all_users(self) -> list[dict]:
        return self._read_json("users.json", [])

    def save_users(self, users: list[dict]) -> None:
        self._write_json("users.json", users)

    def get_user_profile(self, user_id: str) -> dict | None:
        for user in self.get_all_users():
            if user.get("id") == user_id:
                return user
        return None

    def update_user_profile(self, user_id: str, fields: dict) -> None:
        with self._lock:
            self._update_user(user_id, lambda user: user.update(fields))

    def append_order_to_history(self, user_id: str, order_id: str) -> None:
        def append(user):
            history = user.setdefault("orderHistory", [])
            if order_id not in history:
                history.append(order_id)

        with self._lock:
            self._update_user(user_id, append)

    def _update_user(self, user_id: str, change) -> None:
        users = self.get_all_users()
        for user in users:
            if user.get("id") == user_id:
                change(user)
                self._write_json("users.json", users)
                return
        raise KeyError(f"No such user: {user_id}")
