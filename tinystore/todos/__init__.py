"""
Todo 與 Goal 清單的狀態配置：實體模型、Action、切片 reducer 與根 reducer。
"""
from .actions import (
    ADD_GOAL, ADD_TODO, REMOVE_GOAL, REMOVE_TODO, TOGGLE_TODO,
    add_goal, add_todo, remove_goal, remove_todo, toggle_todo,
)
from .models import AppState, EntityId, Goal, Todo
from .reducers import app_reducer, goals_reducer, todos_reducer
from .store import create_app_store

__all__ = [
    # Actions
    "ADD_TODO", "REMOVE_TODO", "TOGGLE_TODO", "ADD_GOAL", "REMOVE_GOAL",
    "add_todo", "remove_todo", "toggle_todo", "add_goal", "remove_goal",

    # Models
    "AppState", "EntityId", "Goal", "Todo",

    # Reducers
    "app_reducer", "goals_reducer", "todos_reducer",

    # Store
    "create_app_store",
]
