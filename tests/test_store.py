"""Tests for the in-memory record store."""

import pytest

from tada.models import TodoItem
from tada.store import InvalidPositionError, TodoStore


@pytest.fixture
def store() -> TodoStore:
    s = TodoStore()
    s.add("First", "Work", "High")
    s.add("Second", "Home", "Low")
    s.add("Third", "Work", "Medium")
    return s


class TestTodoStoreAdd:
    def test_add_appends_pending(self):
        store = TodoStore()

        item = store.add("Buy milk", "Home", "Low")

        assert item == TodoItem(title="Buy milk", done=False, category="Home", priority="Low")
        assert list(store) == [item]

    def test_add_keeps_insertion_order(self, store: TodoStore):
        assert [i.title for i in store] == ["First", "Second", "Third"]
        assert all(not i.done for i in store)

    def test_add_allows_empty_and_duplicate_titles(self):
        store = TodoStore()
        store.add("", "", "low")
        store.add("", "", "low")
        assert len(store) == 2


class TestTodoStoreMarkDone:
    def test_mark_done_sets_only_that_position(self, store: TodoStore):
        item = store.mark_done(2)

        assert item.title == "Second"
        assert [i.done for i in store] == [False, True, False]

    @pytest.mark.parametrize("position", [0, -1, 4, 100])
    def test_out_of_range_leaves_store_unchanged(self, store: TodoStore, position: int):
        before = [i.to_dict() for i in store]

        with pytest.raises(InvalidPositionError):
            store.mark_done(position)

        assert [i.to_dict() for i in store] == before

    def test_invalid_position_is_index_error(self):
        with pytest.raises(IndexError):
            TodoStore().mark_done(1)


class TestTodoStoreDelete:
    def test_delete_shifts_later_positions(self, store: TodoStore):
        removed = store.delete(1)

        assert removed.title == "First"
        assert [i.title for i in store] == ["Second", "Third"]

    def test_delete_last(self, store: TodoStore):
        store.delete(3)
        assert [i.title for i in store] == ["First", "Second"]

    @pytest.mark.parametrize("position", [0, 4])
    def test_out_of_range_leaves_store_unchanged(self, store: TodoStore, position: int):
        with pytest.raises(InvalidPositionError) as exc_info:
            store.delete(position)

        assert exc_info.value.position == position
        assert exc_info.value.size == 3
        assert len(store) == 3

    def test_mark_done_then_delete_scenario(self):
        store = TodoStore()
        store.add("A", "x", "High")
        store.add("B", "y", "Low")

        store.mark_done(2)
        store.delete(1)

        assert list(store) == [TodoItem(title="B", done=True, category="y", priority="Low")]


class TestTodoStoreAppendAndClear:
    def test_append_keeps_item(self, store: TodoStore):
        item = TodoItem(title="Loaded", done=True)
        store.append(item)
        assert list(store)[-1] is item

    def test_clear(self, store: TodoStore):
        store.clear()
        assert len(store) == 0
