"""
TinyStore 的 Action 定義模組。

此模組提供 Action 類別以及創建 Action 的功能。
Actions 是描述狀態變更意圖的不可變對象，由 type 字串區分種類。
"""
from typing import Any, Callable, Generic, Optional, overload

from .immutable_utils import to_immutable
from .types import P, ActionCreator, ActionCreatorWithoutPayload


class Action(Generic[P]):
    """
    一次狀態轉換請求：type 是 reducer 據以分派的辨別字串，payload 是該種類需要的資料。

    建立後不可修改、不可增刪屬性；以 (type, payload) 比較相等與計算雜湊。
    """
    __slots__ = ('type', 'payload')

    def __init__(self, type: str, payload: Optional[P] = None):
        super().__setattr__('type', type)
        super().__setattr__('payload', payload)

    def __setattr__(self, name, value):
        if name not in self.__slots__:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        raise AttributeError(f"Cannot modify immutable instance attribute '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete immutable instance attribute '{name}'")

    def __eq__(self, other):
        if not isinstance(other, Action):
            return NotImplemented
        return self.type == other.type and self.payload == other.payload

    def __hash__(self):
        return hash((self.type, self.payload))

    def __repr__(self):
        return f"Action(type='{self.type}', payload={repr(self.payload)})"


def _process_payload(payload: Any) -> Any:
    """
    處理 payload，將字典（包括巢狀結構）轉換為不可變的 Map。

    Args:
        payload: 原始 payload

    Returns:
        處理後的 payload
    """
    if isinstance(payload, dict):
        return to_immutable(payload)
    return payload


@overload
def create_action(action_type: str) -> ActionCreatorWithoutPayload:
    ...


@overload
def create_action(action_type: str, prepare_fn: Callable[..., P]) -> ActionCreator[P]:
    ...


def create_action(action_type: str, prepare_fn: Optional[Callable[..., Any]] = None) -> ActionCreator[Any]:
    """
    創建一個 Action 生成器函數。

    Args:
        action_type: Action 的類型標識符
        prepare_fn: 可選的預處理函數，用於在創建 Action 前處理輸入參數

    Returns:
        一個可調用的函數，用於生成指定類型的 Action

    範例:
        >>> add_goal = create_action("ADD_GOAL")
        >>> add_goal({"id": 1, "name": "Run"})  # Action(type='ADD_GOAL', payload=Map(...))
        >>>
        >>> remove_goal = create_action("REMOVE_GOAL", lambda id: id)
        >>> remove_goal(1)  # Action(type='REMOVE_GOAL', payload=1)
    """
    if not isinstance(action_type, str) or not action_type:
        raise ValueError("create_action: action_type 必須是非空字串")

    def action_creator(*args: Any, **kwargs: Any) -> Action[Any]:
        if prepare_fn:
            payload = prepare_fn(*args, **kwargs)
        elif len(args) == 1 and not kwargs:
            payload = args[0]
        elif args or kwargs:
            payload = dict(zip(range(len(args)), args))
            payload.update(kwargs)
        else:
            # 無參數，無負載
            return Action(action_type)
        return Action(action_type, _process_payload(payload))

    # 添加 type 屬性以便於識別
    action_creator.type = action_type  # type: ignore
    action_creator.__name__ = f"create_{action_type}"

    return action_creator  # type: ignore


def is_action(value: Any) -> bool:
    """判斷一個值是否帶有可用於分派的 type 辨別欄位。"""
    action_type = getattr(value, "type", None)
    return isinstance(action_type, str) and bool(action_type)


# 根 Actions
init_store: ActionCreatorWithoutPayload = create_action("[Root] Init Store")
