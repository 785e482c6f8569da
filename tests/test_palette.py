"""Tests for the command palette."""

from unittest.mock import MagicMock

import pytest

from promptbank.client.palette import CommandPalette


@pytest.fixture()
def palette_for(notifier):
    def _palette_for(state, clipboard=None):
        return CommandPalette(state, notifier, clipboard=clipboard or MagicMock())

    return _palette_for


def _many_prompts(n):
    return [
        {"id": f"p{i}", "folder_id": "f1", "title": f"Prompt {i}", "content": "body", "tags": []}
        for i in range(n)
    ]


class TestOpenClose:

    def test_query_resets_on_open_and_close(self, make_state, palette_for):
        state = make_state()
        palette = palette_for(state)
        palette.open()
        palette.set_query("poem")
        palette.close()
        assert palette.query == ""
        assert not state.palette_open

        palette.set_query("leftover")
        palette.open()
        assert palette.query == ""
        assert palette.is_open


class TestResults:

    def test_filters_ignore_folder_selection(self, make_state, palette_for):
        state = make_state()
        state.select_folder("f1")
        palette = palette_for(state)
        palette.set_query("roses")
        assert [p["id"] for p in palette.results().prompts] == ["p2"]

    def test_folders_match_on_name_only(self, make_state, palette_for):
        palette = palette_for(make_state())
        palette.set_query("hom")
        results = palette.results()
        assert [f["id"] for f in results.folders] == ["f2"]
        assert results.prompts == []

    def test_caps_prompts_at_ten(self, make_state, palette_for):
        palette = palette_for(make_state(prompts=_many_prompts(13)))
        results = palette.results()
        assert len(results.prompts) == 10
        assert results.more_prompts == 3
        assert results.more_label == "+3 more"

    def test_no_more_label_under_limit(self, make_state, palette_for):
        results = palette_for(make_state()).results()
        assert results.more_label == ""

    def test_new_prompt_disabled_without_folders(self, make_state, palette_for):
        results = palette_for(make_state(folders=[], prompts=[])).results()
        actions = {a.label: a.enabled for a in results.actions}
        assert actions == {"New Prompt": False, "View All Prompts": True}


class TestSelections:

    def test_new_prompt_action(self, make_state, palette_for):
        state = make_state()
        palette = palette_for(state)
        palette.open()
        assert palette.run_action("New Prompt")
        assert state.is_creating_new
        assert not state.palette_open

    def test_new_prompt_action_disabled(self, make_state, palette_for):
        state = make_state(folders=[], prompts=[])
        palette = palette_for(state)
        palette.open()
        assert not palette.run_action("New Prompt")
        assert not state.is_creating_new

    def test_view_all_clears_folder(self, make_state, palette_for):
        state = make_state()
        state.select_folder("f2")
        palette = palette_for(state)
        palette.open()
        palette.run_action("View All Prompts")
        assert state.selected_folder_id is None
        assert not state.palette_open

    def test_unknown_action_raises(self, make_state, palette_for):
        with pytest.raises(ValueError):
            palette_for(make_state()).run_action("Launch Rockets")

    def test_select_folder_and_prompt(self, make_state, palette_for):
        state = make_state()
        palette = palette_for(state)
        palette.open()
        palette.select_folder("f2")
        assert state.selected_folder_id == "f2"
        assert not state.palette_open

        palette.open()
        palette.select_prompt("p1")
        assert state.selected_prompt_id == "p1"
        assert not state.palette_open

    def test_copy_prompt(self, make_state, palette_for, notifier):
        state = make_state()
        clipboard = MagicMock()
        palette = palette_for(state, clipboard)
        palette.open()
        assert palette.copy_prompt(state.prompts[1])
        clipboard.assert_called_once_with("Roses are red")
        assert notifier.last.message == 'Copied "Poem" to clipboard'
        assert not state.palette_open
