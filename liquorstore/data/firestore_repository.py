# data/firestore_repository.py
"""
Firestore-backed store with the same surface as DataRepository.

Credentials are looked up in this order:
    FIREBASE_CREDENTIALS env var
    GOOGLE_APPLICATION_CREDENTIALS env var
    serviceAccountKey.json in the working directory
Without any of them the Firestore emulator is used when
FIRESTORE_EMULATOR_HOST is set.
"""

import os

import firebase_admin
from firebase_admin import credentials, firestore

from liquorstore.data.repository import DEFAULT_SETTINGS
from liquorstore.utils.logger import get_logger

logger = get_logger("firestore")

ORDERS = "orders"
PRODUCTS = "products"
USERS = "users"
SETTINGS = "settings"
DEFAULT_SETTINGS_DOC = "store"


def connect():
    """Initialise the firebase_admin app once and return a Firestore client."""
    if not firebase_admin._apps:
        cred_path = (
            os.getenv("FIREBASE_CREDENTIALS")
            or os.getenv("GOOGLE_APPLICATION_CREDENTIALS")
            or "serviceAccountKey.json"
        )
        if os.path.exists(cred_path):
            firebase_admin.initialize_app(credentials.Certificate(cred_path))
        elif os.getenv("FIRESTORE_EMULATOR_HOST"):
            firebase_admin.initialize_app()
        else:
            raise RuntimeError(
                "Firebase credentials not found. Set FIREBASE_CREDENTIALS or "
                "GOOGLE_APPLICATION_CREDENTIALS to your serviceAccountKey.json, "
                "or set FIRESTORE_EMULATOR_HOST."
            )
        logger.info("firebase app initialised")
    return firestore.client()


class FirestoreRepository:
    def __init__(self, client=None):
        self.db = client if client is not None else connect()

    def _collection(self, name: str) -> list[dict]:
        return [{"id": doc.id, **(doc.to_dict() or {})} for doc in self.db.collection(name).stream()]

    def _settings_ref(self):
        # the admin console edits whichever single document lives in "settings"
        docs = list(self.db.collection(SETTINGS).limit(1).stream())
        if docs:
            return docs[0].reference, docs[0].to_dict() or {}
        return self.db.collection(SETTINGS).document(DEFAULT_SETTINGS_DOC), {}

    def get_store_settings(self) -> dict:
        _, data = self._settings_ref()
        return {key: data.get(key, default) for key, default in DEFAULT_SETTINGS.items()}

    def save_store_settings(self, settings: dict) -> None:
        ref, _ = self._settings_ref()
        ref.set(settings, merge=True)

    def get_all_orders(self) -> list[dict]:
        return self._collection(ORDERS)

    def get_all_products(self) -> list[dict]:
        return self._collection(PRODUCTS)

    def get_all_users(self) -> list[dict]:
        return self._collection(USERS)

    def create_order(self, record: dict) -> str:
        _, ref = self.db.collection(ORDERS).add(record)
        return ref.id

    def get_user_profile(self, user_id: str) -> dict | None:
        snap = self.db.collection(USERS).document(user_id).get()
        return snap.to_dict() if snap.exists else None

    def update_user_profile(self, user_id: str, fields: dict) -> None:
        self.db.collection(USERS).document(user_id).update(fields)

    def append_order_to_history(self, user_id: str, order_id: str) -> None:
        # ArrayUnion lets Firestore apply the append atomically server-side
        self.db.collection(USERS).document(user_id).update(
            {"orderHistory": firestore.ArrayUnion([order_id])}
        )
