from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict

EntityId = Union[int, str]


# ====== Model Definition ======
class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: EntityId
    name: str
    complete: bool = False


class Goal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: EntityId
    name: str


class AppState(BaseModel):
    """根狀態：兩個各自獨立 reduce 的切片。"""
    model_config = ConfigDict(frozen=True)

    todos: Tuple[Todo, ...] = ()
    goals: Tuple[Goal, ...] = ()
