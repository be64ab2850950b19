# tinystore/immutable_utils.py
from typing import Any

from immutables import Map
from pydantic import BaseModel


def to_immutable(obj: Any) -> Any:
    """將字典、列表、集合遞迴轉換為不可變形式（Map、tuple、frozenset）"""
    if isinstance(obj, (dict, Map)):
        return Map({k: to_immutable(v) for k, v in obj.items()})
    elif isinstance(obj, (list, tuple)):
        return tuple(to_immutable(i) for i in obj)
    elif isinstance(obj, (set, frozenset)):
        return frozenset(to_immutable(i) for i in obj)
    # 其他類型（包括 Pydantic 模型）直接返回
    return obj


def to_dict(obj: Any) -> Any:
    """將 Map、Pydantic 模型及其巢狀結構轉換為普通 Python 資料"""
    if isinstance(obj, BaseModel):
        return {k: to_dict(getattr(obj, k)) for k in type(obj).model_fields}
    elif isinstance(obj, (Map, dict)):
        return {k: to_dict(v) for k, v in obj.items()}
    elif isinstance(obj, (tuple, list)):
        return [to_dict(i) for i in obj]
    elif isinstance(obj, frozenset):
        return {to_dict(i) for i in obj}
    return obj
