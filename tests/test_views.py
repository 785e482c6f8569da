"""Tests for the pure list/filter derivations."""

from promptbank.client import views

FOLDERS = [
    {"id": "f1", "name": "Work", "color": "#3b82f6"},
    {"id": "f2", "name": "Home", "color": ""},
]

PROMPTS = [
    {"id": "p1", "folder_id": "f1", "title": "Email Reply", "content": "Dear customer", "tags": ["a", "b", "c"]},
    {"id": "p2", "folder_id": "f2", "title": "Poem", "content": "Roses are red", "tags": []},
    {"id": "p3", "folder_id": "gone", "title": "Orphan", "content": "forward the EMAIL", "tags": ["x"]},
]


class TestFilterPrompts:

    def test_empty_query_returns_all_in_order(self):
        assert [p["id"] for p in views.filter_prompts(PROMPTS)] == ["p1", "p2", "p3"]

    def test_matches_title_or_content_case_insensitively(self):
        assert [p["id"] for p in views.filter_prompts(PROMPTS, "eMaIl")] == ["p1", "p3"]

    def test_folder_filter(self):
        assert [p["id"] for p in views.filter_prompts(PROMPTS, "", "f2")] == ["p2"]

    def test_query_and_folder_combine(self):
        assert views.filter_prompts(PROMPTS, "email", "f2") == []

    def test_exactly_matching_set(self):
        query = "re"
        expected = {
            p["id"] for p in PROMPTS
            if query in p["title"].lower() or query in p["content"].lower()
        }
        assert {p["id"] for p in views.filter_prompts(PROMPTS, query)} == expected


class TestFilterFolders:

    def test_name_substring_only(self):
        assert [f["id"] for f in views.filter_folders(FOLDERS, "WO")] == ["f1"]

    def test_empty_query_returns_all(self):
        assert views.filter_folders(FOLDERS, "") == FOLDERS


class TestRows:

    def test_unknown_folder_falls_back(self):
        assert views.folder_label(FOLDERS, "gone") == ("Unknown", "#6366f1")

    def test_blank_color_falls_back(self):
        assert views.folder_label(FOLDERS, "f2") == ("Home", "#6366f1")

    def test_tag_preview_overflow(self):
        assert views.tag_preview(["a", "b", "c", "d"]) == (["a", "b"], 2)
        assert views.tag_preview(None) == ([], 0)

    def test_prompt_rows(self):
        rows = views.prompt_rows(PROMPTS, FOLDERS, selected_prompt_id="p1")
        first = rows[0]
        assert first.folder_name == "Work"
        assert first.tags == ["a", "b"]
        assert first.overflow_label == "+1"
        assert first.selected
        assert rows[1].overflow_label == ""


class TestEmptyState:

    def test_no_folders(self):
        assert views.empty_state_message([], []) == "Create a folder first"

    def test_no_matches(self):
        assert views.empty_state_message(FOLDERS, []) == "No prompts found"

    def test_rows_present(self):
        assert views.empty_state_message(FOLDERS, views.prompt_rows(PROMPTS, FOLDERS)) is None
