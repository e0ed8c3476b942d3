"""Store and notifier services used by the request handlers."""

from .store import ContactStore, get_store
from .notifier import Notifier, get_notifier

__all__ = [
    'ContactStore',
    'get_store',
    'Notifier',
    'get_notifier',
]
