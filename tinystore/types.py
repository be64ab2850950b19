"""
TinyStore 共用的類型定義。
"""
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from typing_extensions import Protocol

if TYPE_CHECKING:
    from .actions import Action

S = TypeVar("S")  # 狀態類型
P = TypeVar("P")  # 負載類型
P_co = TypeVar("P_co", covariant=True)

# reducer: (前一個狀態或 None, action) -> 下一個狀態
Reducer = Callable[[Optional[S], "Action[Any]"], S]
ActionHandler = Callable[[S, "Action[Any]"], S]

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]
StateSelector = Callable[[S], Any]


class ActionCreator(Protocol[P_co]):
    """由 create_action 產生的 Action 生成器。"""

    type: str

    def __call__(self, *args: Any, **kwargs: Any) -> "Action[P_co]": ...


class ActionCreatorWithoutPayload(Protocol):
    type: str

    def __call__(self) -> "Action[None]": ...
