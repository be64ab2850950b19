"""
TinyStore 錯誤處理模組。

定義函式庫拋出的異常類型，以及用於記錄被隔離之 listener 錯誤的集中式錯誤處理器。
"""
import logging
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


class TinyStoreError(Exception):
    """所有 TinyStore 異常的基礎類。"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        轉換為可序列化的字典，方便上報或記錄。

        Returns:
            包含錯誤類型、訊息與細節的字典。
        """
        return {
            "type": type(self).__name__,
            "message": self.message,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({details})"


class ActionError(TinyStoreError):
    """與 Action 相關的錯誤，例如缺少 type 辨別欄位。"""

    def __init__(self, message: str, action_type: Any = None, **kwargs: Any) -> None:
        super().__init__(message, {"action_type": action_type, **kwargs})
        self.action_type = action_type


class StoreError(TinyStoreError):
    """在 Store 上執行了不被允許的操作。"""

    def __init__(self, message: str, operation: str, **kwargs: Any) -> None:
        super().__init__(message, {"operation": operation, **kwargs})
        self.operation = operation


class ConfigurationError(TinyStoreError):
    """配置相關的錯誤。"""

    def __init__(self, message: str, component: str, config_key: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(message, {"component": component, "config_key": config_key, **kwargs})
        self.component = component
        self.config_key = config_key


class ListenerError(TinyStoreError):
    """listener 在通知過程中拋出的異常，原始異常保存在 __cause__。"""

    def __init__(self, message: str, listener_name: str, **kwargs: Any) -> None:
        super().__init__(message, {"listener_name": listener_name, **kwargs})
        self.listener_name = listener_name


class ErrorHandler:
    """集中式錯誤處理器，用於日誌記錄和錯誤報告。"""

    def __init__(self, log_to_console: bool = True) -> None:
        """
        Args:
            log_to_console: 是否透過 logging 記錄錯誤。
        """
        self.log_to_console = log_to_console
        self.handlers: List[Callable[[TinyStoreError], None]] = []

    def register_handler(self, handler: Callable[[TinyStoreError], None]) -> None:
        """
        註冊一個額外的錯誤處理函數，例如上報到監控系統。

        Args:
            handler: 接收 TinyStoreError 的函數。
        """
        if not callable(handler):
            raise ConfigurationError("錯誤處理函數必須是可呼叫物件", component="ErrorHandler")
        self.handlers.append(handler)

    def handle(self, error: Union[TinyStoreError, Exception]) -> None:
        """
        處理一個錯誤：記錄日誌後依序交給已註冊的處理函數。

        Args:
            error: 要處理的錯誤，非 TinyStoreError 會先被包裝。
        """
        if not isinstance(error, TinyStoreError):
            wrapped = TinyStoreError(str(error), {"original_type": type(error).__name__})
            wrapped.__cause__ = error
            error = wrapped

        if self.log_to_console:
            cause = error.__cause__ or error
            logger.error("%s: %s", type(error).__name__, error, exc_info=cause)

        for handler in self.handlers:
            handler(error)


# 單例錯誤處理器
global_error_handler = ErrorHandler()
