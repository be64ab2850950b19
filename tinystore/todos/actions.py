"""
Todo 與 Goal 的 Action 種類和 Action 生成器。
"""
from tinystore.actions import create_action

from .models import Goal, Todo

# Todos constants
ADD_TODO = "ADD_TODO"
REMOVE_TODO = "REMOVE_TODO"
TOGGLE_TODO = "TOGGLE_TODO"

# Goals constants
ADD_GOAL = "ADD_GOAL"
REMOVE_GOAL = "REMOVE_GOAL"

# add_* 接受模型實例或字典，payload 一律是驗證過的模型
add_todo = create_action(ADD_TODO, lambda todo: Todo.model_validate(todo))
remove_todo = create_action(REMOVE_TODO, lambda id: id)
toggle_todo = create_action(TOGGLE_TODO, lambda id: id)

add_goal = create_action(ADD_GOAL, lambda goal: Goal.model_validate(goal))
remove_goal = create_action(REMOVE_GOAL, lambda id: id)
