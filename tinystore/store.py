import logging
from typing import Any, Callable, Generic, Optional, Tuple

import reactivex
from reactivex import Observable, operators as ops
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.subject import Subject

from .actions import Action, init_store, is_action
from .errors import (
    ActionError,
    ConfigurationError,
    ErrorHandler,
    ListenerError,
    StoreError,
    global_error_handler,
)
from .types import S, Listener, Reducer, StateSelector, Unsubscribe

logger = logging.getLogger(__name__)

# listener 出錯時的處理策略
ISOLATE = "isolate"
PROPAGATE = "propagate"
LISTENER_ERROR_POLICIES = (ISOLATE, PROPAGATE)

# selector 失敗時的佔位值，不會發送給訂閱者
_SKIPPED = object()


def _callable_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", repr(fn))


class Store(Generic[S]):
    """
    狀態容器，保存唯一的應用狀態並通知訂閱者狀態變更。

    狀態只能透過 dispatch 一個 Action、由 reducer 計算出新狀態來更新。
    每次 dispatch 都會先完成 reducer 計算與狀態替換，再依註冊順序同步通知所有 listener。
    """

    def __init__(
        self,
        reducer: Reducer[S],
        *,
        listener_errors: str = ISOLATE,
        error_handler: Optional[ErrorHandler] = None,
    ):
        """
        以 reducer 建立 Store，並以 init_store action 計算初始狀態。

        Args:
            reducer: 純函數 (state, action) -> new_state，收到 None 時須返回預設狀態。
            listener_errors: listener 拋出異常時的策略，"isolate" 記錄後繼續，"propagate" 直接拋出。
            error_handler: 處理被隔離的 listener 錯誤，預設為 global_error_handler。

        Raises:
            ConfigurationError: reducer 不可呼叫或 listener_errors 不合法。
        """
        if not callable(reducer):
            raise ConfigurationError(
                f"reducer 必須是可呼叫物件，收到 {type(reducer).__name__}",
                component="Store",
                config_key="reducer",
            )
        if listener_errors not in LISTENER_ERROR_POLICIES:
            raise ConfigurationError(
                f"未知的 listener_errors 策略: {listener_errors!r}",
                component="Store",
                config_key="listener_errors",
                allowed=LISTENER_ERROR_POLICIES,
            )

        self._reducer = reducer
        self._listener_errors = listener_errors
        self._error_handler = error_handler or global_error_handler
        self._is_reducing = False
        # 狀態流（Subject），每次 dispatch 發送 (old_state, new_state)
        self._state_subject: Subject = Subject()
        # 初始化狀態
        self._state: S = self._reduce(None, init_store())

    def _reduce(self, state: Optional[S], action: Action) -> S:
        """
        呼叫 reducer，期間禁止 dispatch 與 subscribe。reducer 的異常不做攔截。
        """
        self._is_reducing = True
        try:
            return self._reducer(state, action)
        finally:
            self._is_reducing = False

    def _notify(self, callback: Callable[..., Any], name: str, *args: Any) -> None:
        """
        呼叫單一 listener 或 select 觀察者，依策略處理其異常。

        Args:
            callback: 要呼叫的函數。
            name: 記錄錯誤時使用的名稱。
            *args: 傳給 callback 的參數。
        """
        if self._listener_errors == PROPAGATE:
            callback(*args)
            return

        try:
            callback(*args)
        except Exception as err:
            self._report(err, name)

    def _report(self, err: Exception, name: str) -> None:
        error = ListenerError(f"listener {name} 執行失敗: {err}", listener_name=name)
        error.__cause__ = err
        self._error_handler.handle(error)

    def get_state(self) -> S:
        """
        獲取當前狀態（同一個物件，而非副本）。

        Returns:
            最近一次 dispatch 完成後的狀態。
        """
        return self._state

    @property
    def state(self) -> S:
        """當前狀態，等同 get_state()。"""
        return self._state

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """
        註冊一個在每次 dispatch 之後被呼叫的 listener。

        同一個函數可以重複註冊，每次註冊都是獨立的，需要分別取消。
        在通知過程中新增的 listener 從下一次 dispatch 才開始被呼叫。

        Args:
            listener: 不接收參數的回呼函數。

        Returns:
            取消訂閱的函數，重複呼叫不會有任何效果。
        """
        if not callable(listener):
            raise StoreError("listener 必須是可呼叫物件", operation="subscribe")
        if self._is_reducing:
            raise StoreError("reducer 執行期間不可 subscribe", operation="subscribe")

        name = _callable_name(listener)
        subscription = self._state_subject.subscribe(
            on_next=lambda _: self._notify(listener, name)
        )

        def unsubscribe() -> None:
            subscription.dispose()

        return unsubscribe

    def dispatch(self, action: Action) -> Action:
        """
        分發一個動作：計算新狀態、替換狀態，然後依序通知 listener。

        在 listener 中再次 dispatch 會立即執行完整的一輪（reduce 與通知），
        之後外層的通知再繼續。

        Args:
            action: 要分發的 Action，必須帶有非空的 type 字串。

        Returns:
            傳入的 Action。

        Raises:
            ActionError: action 缺少 type 辨別欄位。
            StoreError: 在 reducer 執行期間呼叫。
        """
        if not is_action(action):
            raise ActionError(
                f"無法分發缺少 type 的 action: {action!r}",
                action_type=getattr(action, "type", None),
            )
        if self._is_reducing:
            raise StoreError("reducer 執行期間不可 dispatch", operation="dispatch", action_type=action.type)

        old_state = self._state
        new_state = self._reduce(old_state, action)
        self._state = new_state
        logger.debug("dispatched %s", action.type)

        self._state_subject.on_next((old_state, new_state))
        return action

    def select(self, selector: Optional[StateSelector[S]] = None) -> Observable:
        """
        選擇狀態的一部分進行觀察。

        Args:
            selector: 一個函數，接收整個狀態並返回希望觀察的部分。

        Returns:
            一個可觀察對象，發送 (舊值, 新值) 元組。

        selector 與訂閱者的 on_next 拋出的異常和 listener 一樣依 listener_errors 處理：
        "isolate" 時記錄後略過這次變更，串流保持有效，其他 listener 照常收到通知。
        """
        if selector is None:
            name = "select"
            # 完整的狀態元組 (old_state, new_state)
            source = self._state_subject.pipe(ops.as_observable())
        else:
            name = f"select({_callable_name(selector)})"

            def select_pair(state_tuple: Tuple[S, S]) -> Any:
                try:
                    return (selector(state_tuple[0]), selector(state_tuple[1]))
                except Exception as err:
                    if self._listener_errors == PROPAGATE:
                        raise
                    self._report(err, name)
                    return _SKIPPED

            source = self._state_subject.pipe(
                # 將元組 (old_state, new_state) 轉換為 (selector(old_state), selector(new_state))
                ops.map(select_pair),
                ops.filter(lambda pair: pair is not _SKIPPED),
                # 只有當新值變化時才發出
                ops.distinct_until_changed(lambda x: x[1]),
            )

        def subscribe(observer: ObserverBase, scheduler: Optional[SchedulerBase] = None) -> DisposableBase:
            return source.subscribe(
                on_next=lambda pair: self._notify(observer.on_next, name, pair),
                on_error=observer.on_error,
                on_completed=observer.on_completed,
                scheduler=scheduler,
            )

        return reactivex.create(subscribe)


def create_store(reducer: Reducer[S], **options: Any) -> Store[S]:
    """
    創建一個新的 Store 實例。

    Args:
        reducer: 根 reducer。
        **options: 傳給 Store 的關鍵字選項（listener_errors、error_handler）。

    Returns:
        Store: 新創建的 Store 實例。
    """
    return Store(reducer, **options)
