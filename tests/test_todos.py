import json

import pytest

from lowlevelkit.todos import TodoList, TodoTask


def test_to_json_format():
    task = TodoTask(0, "a", "b")
    assert task.to_json() == '{"id":0,"title":"a","description":"b"}'


def test_to_json_round_trips_through_json():
    task = TodoTask(7, "Groceries", "milk")
    assert json.loads(task.to_json()) == {
        "id": 7,
        "title": "Groceries",
        "description": "milk",
    }


def test_add_assigns_sequential_ids():
    todos = TodoList()
    first = todos.add("one", "first")
    second = todos.add("two", "second")
    third = todos.add("three", "third")
    assert [first.id, second.id, third.id] == [0, 1, 2]
    assert len(todos) == 3


def test_add_keeps_title_and_description():
    todos = TodoList()
    task = todos.add("Title", "Description")
    assert (task.title, task.description) == ("Title", "Description")


def test_last_returns_most_recent():
    todos = TodoList()
    todos.add("one", "first")
    latest = todos.add("two", "second")
    assert todos.last() is latest


def test_last_of_empty_list_is_none():
    assert TodoList().last() is None


def test_iteration_preserves_insertion_order():
    todos = TodoList()
    for title in ("x", "y", "z"):
        todos.add(title, title * 2)
    assert [task.title for task in todos] == ["x", "y", "z"]


@pytest.mark.parametrize("title, description", [(None, "d"), ("t", None)])
def test_add_rejects_missing_fields(title, description):
    todos = TodoList()
    with pytest.raises(ValueError):
        todos.add(title, description)
    assert len(todos) == 0