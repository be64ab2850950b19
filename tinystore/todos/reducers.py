from typing import Optional, Tuple

from tinystore.actions import Action
from tinystore.reducers import create_reducer, on

from .actions import add_goal, add_todo, remove_goal, remove_todo, toggle_todo
from .models import AppState, Goal, Todo


# ====== Handlers ======
def _append(state: tuple, action: Action) -> tuple:
    return state + (action.payload,)


def _remove_by_id(state: tuple, action: Action) -> tuple:
    remaining = tuple(entity for entity in state if entity.id != action.payload)
    if len(remaining) == len(state):
        return state  # 找不到對應 id，原樣返回
    return remaining


def _toggle_todo(state: Tuple[Todo, ...], action: Action) -> Tuple[Todo, ...]:
    if not any(todo.id == action.payload for todo in state):
        return state
    return tuple(
        todo.model_copy(update={"complete": not todo.complete})
        if todo.id == action.payload
        else todo
        for todo in state
    )


# ====== Slice Reducers ======
todos_reducer = create_reducer(
    (),
    on(add_todo, _append),
    on(remove_todo, _remove_by_id),
    on(toggle_todo, _toggle_todo),
)

goals_reducer = create_reducer(
    (),
    on(add_goal, _append),
    on(remove_goal, _remove_by_id),
)


# ====== Root Reducer ======
def app_reducer(state: Optional[AppState], action: Action) -> AppState:
    """
    根 reducer：每次都以各切片 reducer 的結果組裝新的 AppState。

    Args:
        state: 前一個根狀態，None 代表尚未初始化。
        action: 要處理的 action。

    Returns:
        新的 AppState。
    """
    todos: Optional[Tuple[Todo, ...]] = state.todos if state is not None else None
    goals: Optional[Tuple[Goal, ...]] = state.goals if state is not None else None
    # 切片已由各自的 reducer 產生，直接組裝以保留切片的物件身份
    return AppState.model_construct(
        todos=todos_reducer(todos, action),
        goals=goals_reducer(goals, action),
    )
