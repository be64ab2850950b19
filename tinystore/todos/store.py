from typing import Any

from tinystore.store import Store, create_store

from .models import AppState
from .reducers import app_reducer


def create_app_store(**options: Any) -> Store[AppState]:
    """
    建立以 app_reducer 為根 reducer 的 Store。

    Args:
        **options: 傳給 Store 的關鍵字選項。

    Returns:
        初始狀態為 AppState(todos=(), goals=()) 的 Store。
    """
    return create_store(app_reducer, **options)
