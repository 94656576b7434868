# rocketshoes/storage.py
from typing import Dict, Optional, Protocol

from sqlalchemy.orm import sessionmaker

from .database import session_maker as default_session_maker
from .models import StorageItem


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Process-local store; contents are lost on exit."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class SqlStorage:
    """
    Store backed by the ``storage_items`` table, one row per key.

    Calls are synchronous: a write commits before ``set_item`` returns, so the
    cart is durable once an operation reports success. Inside async endpoints
    each commit holds the event loop for one small SQLite transaction.
    """

    def __init__(self, session_factory: sessionmaker = default_session_maker):
        self._session_factory = session_factory

    def get_item(self, key: str) -> Optional[str]:
        with self._session_factory() as session:
            item = session.get(StorageItem, key)
            return item.value if item is not None else None

    def set_item(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            item = session.get(StorageItem, key)
            if item is None:
                session.add(StorageItem(key=key, value=value))
            else:
                item.value = value

    def remove_item(self, key: str) -> None:
        with self._session_factory.begin() as session:
            item = session.get(StorageItem, key)
            if item is not None:
                session.delete(item)
