"""Tests for the todo/goal state configuration."""

from functools import reduce

import pytest
from pydantic import ValidationError

from tinystore import Action, init_store, to_dict
from tinystore.todos import (
    ADD_GOAL,
    ADD_TODO,
    REMOVE_GOAL,
    REMOVE_TODO,
    TOGGLE_TODO,
    AppState,
    Goal,
    Todo,
    add_goal,
    add_todo,
    app_reducer,
    goals_reducer,
    remove_goal,
    remove_todo,
    todos_reducer,
    toggle_todo,
)


class TestActionCreators:
    def test_kinds(self):
        assert add_todo({"id": 1, "name": "X"}).type == ADD_TODO
        assert remove_todo(1).type == REMOVE_TODO
        assert toggle_todo(1).type == TOGGLE_TODO
        assert add_goal({"id": 1, "name": "Y"}).type == ADD_GOAL
        assert remove_goal(1).type == REMOVE_GOAL

    def test_add_todo_validates_mapping(self):
        action = add_todo({"id": 0, "name": "Walk the dog", "complete": False})
        assert isinstance(action.payload, Todo)
        assert action.payload.name == "Walk the dog"

    def test_add_todo_accepts_model(self):
        todo = Todo(id="abc", name="Read", complete=False)
        assert add_todo(todo).payload is todo

    def test_add_todo_defaults_complete(self):
        assert add_todo({"id": 1, "name": "X"}).payload.complete is False

    def test_add_todo_rejects_missing_fields(self):
        with pytest.raises(ValidationError):
            add_todo({"name": "no id"})

    def test_add_goal_validates_mapping(self):
        assert add_goal({"id": 0, "name": "Lose 10 kilograms."}).payload == Goal(id=0, name="Lose 10 kilograms.")

    def test_id_payloads(self):
        assert remove_todo(7).payload == 7
        assert toggle_todo("x1").payload == "x1"
        assert remove_goal(3).payload == 3

    def test_entities_are_frozen(self):
        todo = Todo(id=1, name="X", complete=False)
        with pytest.raises(ValidationError):
            todo.complete = True


class TestTodosReducer:
    def test_default(self):
        assert todos_reducer(None, init_store()) == ()

    def test_add_appends_in_order(self):
        a = Todo(id=1, name="A", complete=False)
        b = Todo(id=2, name="B", complete=False)
        state = todos_reducer(todos_reducer(None, add_todo(a)), add_todo(b))
        assert state == (a, b)

    def test_add_does_not_mutate_previous(self):
        before = (Todo(id=1, name="A", complete=False),)
        after = todos_reducer(before, add_todo({"id": 2, "name": "B"}))
        assert len(before) == 1
        assert len(after) == 2

    def test_remove(self):
        a = Todo(id=1, name="A", complete=False)
        b = Todo(id=2, name="B", complete=False)
        assert todos_reducer((a, b), remove_todo(1)) == (b,)

    def test_remove_absent_id_is_noop(self):
        state = (Todo(id=1, name="A", complete=False),)
        assert todos_reducer(state, remove_todo(999)) is state

    def test_remove_matches_by_id_not_position(self):
        a = Todo(id=10, name="A", complete=False)
        b = Todo(id=0, name="B", complete=False)
        assert todos_reducer((a, b), remove_todo(0)) == (a,)

    def test_toggle(self):
        a = Todo(id=1, name="A", complete=False)
        b = Todo(id=2, name="B", complete=False)
        state = todos_reducer((a, b), toggle_todo(1))
        assert state[0].complete is True
        assert state[0].id == 1
        assert state[0].name == "A"
        assert state[1] is b
        # 原本的實體沒有被修改
        assert a.complete is False

    def test_toggle_twice_restores(self):
        a = Todo(id=1, name="A", complete=True)
        state = todos_reducer(todos_reducer((a,), toggle_todo(1)), toggle_todo(1))
        assert state[0].complete is True

    def test_toggle_absent_id_is_noop(self):
        state = (Todo(id=1, name="A", complete=False),)
        assert todos_reducer(state, toggle_todo(999)) is state

    def test_ignores_goal_actions(self):
        state = (Todo(id=1, name="A", complete=False),)
        assert todos_reducer(state, add_goal({"id": 1, "name": "G"})) is state
        assert todos_reducer(state, remove_goal(1)) is state


class TestGoalsReducer:
    def test_default(self):
        assert goals_reducer(None, init_store()) == ()

    def test_add_and_remove(self):
        g = Goal(id=0, name="Lose 10 kilograms.")
        state = goals_reducer((), add_goal(g))
        assert state == (g,)
        assert goals_reducer(state, remove_goal(0)) == ()

    def test_toggle_not_recognised(self):
        state = (Goal(id=1, name="G"),)
        assert goals_reducer(state, toggle_todo(1)) is state

    def test_remove_absent_id_is_noop(self):
        state = (Goal(id=1, name="G"),)
        assert goals_reducer(state, remove_goal(2)) is state


class TestAppReducer:
    def test_default_state(self):
        assert app_reducer(None, init_store()) == AppState(todos=(), goals=())

    def test_new_record_every_call(self):
        s1 = app_reducer(None, init_store())
        s2 = app_reducer(s1, Action("UNKNOWN"))
        assert s2 is not s1

    def test_unknown_action_keeps_every_slice(self):
        s1 = app_reducer(None, add_todo({"id": 1, "name": "X"}))
        s2 = app_reducer(s1, Action("UNKNOWN"))
        assert s2.todos is s1.todos
        assert s2.goals is s1.goals

    def test_only_affected_slice_changes(self):
        s1 = app_reducer(None, add_todo({"id": 1, "name": "X"}))
        s2 = app_reducer(s1, add_goal({"id": 1, "name": "G"}))
        assert s2.todos is s1.todos
        assert len(s2.goals) == 1


class TestAppStore:
    def test_initial_state(self, store):
        assert store.get_state() == AppState(todos=(), goals=())

    def test_walkthrough(self, store):
        store.dispatch(add_todo({"id": 0, "name": "Walk the dog", "complete": False}))
        assert [t.id for t in store.get_state().todos] == [0]
        assert store.get_state().todos[0].name == "Walk the dog"

        store.dispatch(remove_todo(0))
        assert store.get_state().todos == ()

        store.dispatch(add_goal({"id": 0, "name": "Lose 10 kilograms."}))
        assert [g.id for g in store.get_state().goals] == [0]

        store.dispatch(remove_goal(0))
        assert store.get_state().goals == ()

    def test_toggle_scenario(self, store):
        store.dispatch(add_todo({"id": 1, "name": "X", "complete": False}))
        store.dispatch(toggle_todo(1))
        todo = store.get_state().todos[0]
        assert todo.complete is True
        assert todo.id == 1
        assert todo.name == "X"

    def test_toggle_absent_id(self, store):
        store.dispatch(add_todo({"id": 1, "name": "X", "complete": False}))
        before = store.get_state().todos
        store.dispatch(toggle_todo(999))
        assert store.get_state().todos is before

    def test_unrecognised_action(self, store):
        store.dispatch(add_todo({"id": 1, "name": "X"}))
        store.dispatch(add_goal({"id": 2, "name": "G"}))
        before = store.get_state()
        store.dispatch(Action("SOMETHING_ELSE", 1))
        after = store.get_state()
        assert after.todos is before.todos
        assert after.goals is before.goals

    def test_replay_matches_fold(self, store):
        actions = [
            add_todo({"id": 1, "name": "A"}),
            add_todo({"id": 2, "name": "B"}),
            add_goal({"id": 1, "name": "G"}),
            toggle_todo(2),
            remove_todo(1),
            Action("NOT_HANDLED"),
            add_goal({"id": 2, "name": "H"}),
            remove_goal(1),
        ]
        for action in actions:
            store.dispatch(action)

        expected = reduce(app_reducer, actions, app_reducer(None, init_store()))
        assert to_dict(store.get_state()) == to_dict(expected)
        assert to_dict(expected) == {
            "todos": [{"id": 2, "name": "B", "complete": True}],
            "goals": [{"id": 2, "name": "H"}],
        }

    def test_listener_reads_state(self, store):
        names = []
        store.subscribe(lambda: names.append([t.name for t in store.get_state().todos]))
        store.dispatch(add_todo({"id": 1, "name": "A"}))
        store.dispatch(add_todo({"id": 2, "name": "B"}))
        assert names == [["A"], ["A", "B"]]
