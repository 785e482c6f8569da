"""Tests for folder sidebar operations."""

from promptbank.client.gateway import ActionResult, ErrorKind
from promptbank.client.sidebar import COLORS, FolderSidebar


class TestCreate:

    def test_blank_name_rejected_without_call(self, make_state, notifier):
        state = make_state()
        sidebar = FolderSidebar(state, notifier)
        result = sidebar.create("   ")
        assert result.error.kind == ErrorKind.VALIDATION
        assert notifier.last.message == "Folder name is required"
        state.gateway.create_folder.assert_not_called()

    def test_create_uses_default_color(self, make_state, notifier):
        state = make_state()
        state.gateway.create_folder.return_value = ActionResult.success({"id": "f3"})
        FolderSidebar(state, notifier).create("Ideas")
        state.gateway.create_folder.assert_called_once_with("Ideas", "#6366f1")
        assert notifier.last.message == "Folder created"

    def test_server_error_is_notified(self, make_state, notifier):
        state = make_state()
        state.gateway.create_folder.return_value = ActionResult.failure(ErrorKind.DATA, "disk full")
        result = FolderSidebar(state, notifier).create("Ideas")
        assert not result.ok
        assert notifier.last.message == "disk full"


class TestUpdateDelete:

    def test_rename_and_recolor(self, make_state, notifier):
        state = make_state()
        state.gateway.update_folder.return_value = ActionResult.success({"id": "f1"})
        FolderSidebar(state, notifier).update("f1", "Office", COLORS[0])
        state.gateway.update_folder.assert_called_once_with("f1", name="Office", color="#ef4444")
        assert notifier.last.message == "Folder updated"

    def test_delete_selected_folder_clears_selection(self, make_state, notifier):
        state = make_state()
        state.gateway.delete_folder.return_value = ActionResult.success()
        state.select_folder("f1")
        FolderSidebar(state, notifier).delete("f1")
        assert state.selected_folder_id is None
        assert notifier.last.message == "Folder deleted"

    def test_delete_other_folder_keeps_selection(self, make_state, notifier):
        state = make_state()
        state.gateway.delete_folder.return_value = ActionResult.success()
        state.select_folder("f1")
        FolderSidebar(state, notifier).delete("f2")
        assert state.selected_folder_id == "f1"

    def test_delete_failure_keeps_selection(self, make_state, notifier):
        state = make_state()
        state.gateway.delete_folder.return_value = ActionResult.failure(ErrorKind.DATA, "Folder not found: f1")
        state.select_folder("f1")
        FolderSidebar(state, notifier).delete("f1")
        assert state.selected_folder_id == "f1"
        assert notifier.last.message == "Folder not found: f1"


class TestPalette:

    def test_colors_include_default(self):
        assert "#6366f1" in COLORS
        assert len(COLORS) == 17
