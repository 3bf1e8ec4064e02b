"""Tests for column operations on BoardService."""

import pytest

from conftest import layout_of
from kanboard.errors import NotFoundError
from kanboard.services import BoardService


class TestAddColumn:
    """Tests for adding columns."""

    def test_appends_empty_column(self, board_service: BoardService, make_board):
        state = make_board({"a": ["t1"]})

        new_state, column = board_service.add_column(state, "Review")

        assert new_state.column_ids == ["a", column.id]
        assert column.id.startswith("col-")
        assert column.name == "Review"
        assert column.title_key == "customColumn"
        assert column.task_ids == ()

    def test_original_state_untouched(self, board_service: BoardService, make_board):
        state = make_board({"a": []})
        board_service.add_column(state, "Review")
        assert state.column_ids == ["a"]

    def test_blank_name_rejected(self, board_service: BoardService, make_board):
        with pytest.raises(ValueError, match="required"):
            board_service.add_column(make_board({"a": []}), "   ")


class TestRenameColumn:
    """Tests for renaming columns."""

    def test_rename_changes_name_only(self, board_service: BoardService, make_board):
        state = make_board({"a": ["t1", "t2"], "b": []})

        new_state = board_service.rename_column(state, "a", "Doing")

        column = new_state.get_column("a")
        assert column.name == "Doing"
        assert column.task_ids == ("t1", "t2")
        assert new_state.column_ids == ["a", "b"]
        assert state.get_column("a").name is None

    def test_rename_missing_column(self, board_service: BoardService, make_board):
        with pytest.raises(NotFoundError) as exc:
            board_service.rename_column(make_board({"a": []}), "zzz", "X")
        assert exc.value.kind == "Column"
        assert exc.value.entity_id == "zzz"
        assert str(exc.value) == "Column not found: zzz"


class TestDeleteColumn:
    """Tests for cascading column deletion."""

    def test_delete_cascades_tasks(self, board_service: BoardService, make_board):
        """Deleting B:[t3,t4] removes both tasks and the column."""
        state = make_board({"a": ["t1", "t2"], "b": ["t3", "t4"]})

        new_state = board_service.delete_column(state, "b")

        assert new_state.column_ids == ["a"]
        assert "t3" not in new_state.tasks
        assert "t4" not in new_state.tasks
        assert new_state.task_count == state.task_count - 2
        assert new_state.invariant_violations() == []

    def test_delete_empty_column(self, board_service: BoardService, make_board):
        state = make_board({"a": ["t1"], "b": []})
        new_state = board_service.delete_column(state, "b")
        assert layout_of(new_state) == {"a": ["t1"]}

    def test_delete_missing_column(self, board_service: BoardService, make_board):
        with pytest.raises(NotFoundError):
            board_service.delete_column(make_board({"a": []}), "b")

    def test_not_found_is_key_error(self, board_service: BoardService, make_board):
        """NotFoundError can be caught as a KeyError."""
        with pytest.raises(KeyError):
            board_service.delete_column(make_board({"a": []}), "b")
