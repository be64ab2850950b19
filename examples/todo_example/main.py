"""
Todo / Goal 清單的命令列示例。
Store 在啟動時建立一次，並注入給負責輸出的 TodoConsole。
文件名: main.py
"""
import json
import uuid

from tinystore import Store, to_dict
from tinystore.todos import (
    AppState,
    add_goal,
    add_todo,
    create_app_store,
    remove_goal,
    remove_todo,
    toggle_todo,
)


def generate_id() -> str:
    """實體 id 由 Store 之外產生"""
    return uuid.uuid4().hex[:8]


class TodoConsole:
    """訂閱 Store，每次狀態變更後重新輸出兩份清單"""

    def __init__(self, store: Store[AppState]):
        self.store = store
        self.unsubscribe = store.subscribe(self.render)

    def render(self):
        state = self.store.get_state()
        print("Todos:")
        for todo in state.todos:
            mark = "x" if todo.complete else " "
            print(f"  [{mark}] {todo.name} ({todo.id})")
        print("Goals:")
        for goal in state.goals:
            print(f"  - {goal.name} ({goal.id})")
        print()


if __name__ == "__main__":
    store = create_app_store()
    console = TodoConsole(store)

    # 訂閱 todos 切片的變化
    store.select(lambda state: state.todos).subscribe(
        on_next=lambda t: print(f"todos 數量: {len(t[0])} -> {len(t[1])}")
    )

    print("\n==== 新增 ====")
    walk = store.dispatch(add_todo({"id": generate_id(), "name": "Walk the dog", "complete": False})).payload
    store.dispatch(add_todo({"id": generate_id(), "name": "Wash the car"}))
    lose = store.dispatch(add_goal({"id": generate_id(), "name": "Lose 10 kilograms."})).payload

    print("\n==== 切換與移除 ====")
    store.dispatch(toggle_todo(walk.id))
    store.dispatch(remove_goal(lose.id))
    store.dispatch(remove_todo(walk.id))

    console.unsubscribe()

    # 打印最終狀態
    print("\n==== 最終狀態 ====")
    print(json.dumps(to_dict(store.state), ensure_ascii=False, indent=2))
