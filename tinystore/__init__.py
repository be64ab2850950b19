"""
TinyStore: 單向資料流的最小狀態容器。
"""
from .errors import (
    TinyStoreError, ActionError, StoreError, ConfigurationError,
    ListenerError, ErrorHandler, global_error_handler,
)
from .actions import Action, create_action, init_store, is_action
from .reducers import create_reducer, on, combine_reducers
from .store import Store, create_store, ISOLATE, PROPAGATE
from .immutable_utils import to_immutable, to_dict

__version__ = "0.1.0"

# 匯出所有公開 API
__all__ = [
    # Errors
    "TinyStoreError", "ActionError", "StoreError", "ConfigurationError",
    "ListenerError", "ErrorHandler", "global_error_handler",

    # Actions
    "Action", "create_action", "init_store", "is_action",

    # Reducers
    "create_reducer", "on", "combine_reducers",

    # Store
    "Store", "create_store", "ISOLATE", "PROPAGATE",

    # Immutable Utils
    "to_immutable", "to_dict",
]
