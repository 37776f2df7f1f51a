"""
Key/value persistence port.

Every piece of state the service keeps (users, sessions, assessment records,
goals, cached reference data) is a JSON document stored under a well-known
key. Two adapters implement the port: an in-memory one for tests and local
runs, and a Firestore one for deployments.
"""
import json
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import settings
from .errors import StorageError

logger = logging.getLogger(__name__)


class StorageKey(str, Enum):
    USERS = "guideai_users"
    ASSESSMENTS = "guideai_assessments"
    SESSIONS = "guideai_currentUser"
    USER_GOALS = "guideai_user_goals"
    CHAT_HISTORY = "guideai_chat_history"
    ISCO_MAJOR_GROUPS = "guideai_isco_major_groups"
    ISCO_SUB_MAJOR_GROUPS = "guideai_isco_sub_major_groups"
    ISCO_MINOR_GROUPS = "guideai_isco_minor_groups"
    ISCO_UNIT_GROUPS = "guideai_isco_unit_groups"
    ISCO_DATA_LOADED = "guideai_isco_data_loaded"

    @staticmethod
    def otp(mobile: str) -> str:
        return f"guideai_otp_{mobile}"


def _key(key) -> str:
    return key.value if isinstance(key, StorageKey) else str(key)


class KeyValueStore(ABC):
    """get/set/delete/list over JSON-serialisable values."""

    @abstractmethod
    def get(self, key) -> Optional[Any]:
        ...

    @abstractmethod
    def set(self, key, value: Any) -> None:
        ...

    @abstractmethod
    def delete(self, key) -> None:
        ...

    @abstractmethod
    def list(self, prefix: str = "") -> List[str]:
        ...

    def get_list(self, key) -> List[Any]:
        value = self.get(key)
        return value if isinstance(value, list) else []

    def get_dict(self, key) -> Dict[str, Any]:
        value = self.get(key)
        return value if isinstance(value, dict) else {}

    def ping(self) -> bool:
        return True


class InMemoryStore(KeyValueStore):
    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    def get(self, key) -> Optional[Any]:
        raw = self._data.get(_key(key))
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Discarding unreadable value for {_key(key)}: {e}")
            return None

    def set(self, key, value: Any) -> None:
        # Serialise on write so callers can never alias stored state
        self._data[_key(key)] = json.dumps(value)

    def delete(self, key) -> None:
        self._data.pop(_key(key), None)

    def list(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self._data if k.startswith(prefix))


class FirestoreStore(KeyValueStore):
    """One Firestore document per key, JSON payload in the `value` field."""

    def __init__(self, collection=None) -> None:
        if collection is None:
            from .firebase_client import kv_collection
            collection = kv_collection()
        self.collection = collection

    def get(self, key) -> Optional[Any]:
        try:
            snapshot = self.collection.document(_key(key)).get()
        except Exception as e:
            logger.error(f"[Firestore] read failed for {_key(key)}: {e}")
            raise StorageError(f"Could not read {_key(key)}") from e
        if not snapshot.exists:
            return None
        return json.loads((snapshot.to_dict() or {}).get("value", "null"))

    def set(self, key, value: Any) -> None:
        try:
            self.collection.document(_key(key)).set({"value": json.dumps(value)})
        except Exception as e:
            logger.error(f"[Firestore] write failed for {_key(key)}: {e}")
            raise

    def delete(self, key) -> None:
        try:
            self.collection.document(_key(key)).delete()
        except Exception as e:
            logger.error(f"[Firestore] delete failed for {_key(key)}: {e}")
            raise

    def list(self, prefix: str = "") -> List[str]:
        return sorted(doc.id for doc in self.collection.list_documents() if doc.id.startswith(prefix))

    def ping(self) -> bool:
        from .firebase_client import ping_firestore
        return ping_firestore()


def build_store(backend: Optional[str] = None) -> KeyValueStore:
    backend = (backend or settings.STORAGE_BACKEND).lower()
    if backend == "firestore":
        return FirestoreStore()
    if backend != "memory":
        logger.warning(f"Unknown STORAGE_BACKEND '{backend}', using in-memory store")
    return InMemoryStore()
