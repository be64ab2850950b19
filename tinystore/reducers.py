from typing import Any, Callable, Dict, Optional, Tuple, Union

from immutables import Map

from .actions import Action
from .errors import ConfigurationError
from .types import S, ActionHandler, Reducer

HandlerTable = Dict[str, ActionHandler[Any]]


def create_reducer(
    initial_state: S,
    *handlers: Union[HandlerTable, Tuple[str, ActionHandler[S]]],
) -> Reducer[S]:
    """
    以 action type 對照表建立一個切片 reducer。

    Args:
        initial_state: 切片的預設值，reducer 收到 None 時返回它。
        *handlers: on(...) 產生的對照表，或 (action_type, handler) 元組，後註冊的覆蓋先註冊的。

    Returns:
        reducer(state, action)：查表呼叫 handler，查不到時返回同一個 state 物件。
        函數上附帶 initial_state 與 handlers 屬性。
    """
    action_handlers: HandlerTable = {}

    for handler in handlers:
        if isinstance(handler, tuple) and len(handler) == 2:
            action_type, handler_fn = handler
            action_handlers[action_type] = handler_fn
        else:
            action_handlers.update(handler)

    def reducer(state: Optional[S] = None, action: Optional[Action] = None) -> S:
        if state is None:
            state = initial_state
        if action is None:
            return state

        handler = action_handlers.get(getattr(action, "type", None))
        if handler:
            return handler(state, action)
        return state

    reducer.initial_state = initial_state
    reducer.handlers = action_handlers

    return reducer


def on(action_creator_or_type: Union[Callable[..., Action], str], handler: ActionHandler[S]) -> HandlerTable:
    """
    把 action type 對應到 handler，供 create_reducer 使用。

    Args:
        action_creator_or_type: create_action 產生的生成器（取其 .type），或 type 字串。
        handler: (state, action) -> new_state，不得修改傳入的 state。

    Returns:
        {action_type: handler}
    """
    if callable(action_creator_or_type) and hasattr(action_creator_or_type, 'type'):
        action_type = action_creator_or_type.type
    else:
        action_type = str(action_creator_or_type)

    return {action_type: handler}


def combine_reducers(reducers: Dict[str, Reducer[Any]]) -> Reducer[Map]:
    """
    將多個切片 reducer 組合為一個根 reducer，狀態以不可變 Map 保存。

    每次 dispatch 都會呼叫所有切片 reducer，並組裝出新的根狀態。

    Args:
        reducers: 切片鍵名到 reducer 的映射字典。

    Returns:
        根 reducer。
    """
    if not reducers:
        raise ConfigurationError("combine_reducers 至少需要一個 reducer", component="combine_reducers")
    for key, reducer in reducers.items():
        if not callable(reducer):
            raise ConfigurationError(
                f"切片 '{key}' 的 reducer 必須是可呼叫物件",
                component="combine_reducers",
                config_key=key,
            )

    slice_reducers = dict(reducers)  # 鎖定組合時的切片集合

    def root_reducer(state: Optional[Map] = None, action: Action = None) -> Map:
        if state is None:
            state = Map()
        return Map({
            key: reducer(state.get(key), action)
            for key, reducer in slice_reducers.items()
        })

    root_reducer.reducers = slice_reducers
    return root_reducer
