"""Tests for the HTTP gateway against the real app."""

from unittest.mock import MagicMock

import httpx

from promptbank.client.gateway import ActionsClient, ActionResult, ErrorKind


def _signed_in(api: ActionsClient, email="alice@example.com") -> ActionsClient:
    api.sign_up(email, "secret123")
    assert api.sign_in(email, "secret123").ok
    return api


class TestResults:

    def test_sign_in_stores_token(self, api):
        _signed_in(api)
        assert api.token
        me = api.get_current_user()
        assert me.ok
        assert me.data["email"] == "alice@example.com"

    def test_unauthenticated_maps_to_kind(self, api):
        result = api.list_folders()
        assert not result.ok
        assert result.error.kind == ErrorKind.UNAUTHENTICATED

    def test_validation_error_carries_field(self, api):
        _signed_in(api)
        folder = api.create_folder("Work").data
        result = api.create_prompt(folder["id"], "  ", "Hello")
        assert result.error.kind == ErrorKind.VALIDATION
        assert result.error.message == "Title is required"
        assert result.error.field == "title"

    def test_not_found_is_data_error(self, api):
        _signed_in(api)
        result = api.delete_folder("missing")
        assert result.error.kind == ErrorKind.DATA
        assert result.error.code == "FOLDER_NOT_FOUND"

    def test_delete_returns_no_data(self, api):
        _signed_in(api)
        folder = api.create_folder("Work").data
        result = api.delete_folder(folder["id"])
        assert result.ok
        assert result.data is None

    def test_search_and_list(self, api):
        _signed_in(api)
        folder = api.create_folder("Work", "#3b82f6").data
        api.create_prompt(folder["id"], "Greeting", "Hello", ["intro"])
        assert [p["title"] for p in api.list_prompts(folder["id"]).data] == ["Greeting"]
        hits = api.search_prompts("HELLO").data
        assert hits[0]["folder"]["name"] == "Work"

    def test_sign_out_clears_token(self, api):
        _signed_in(api)
        assert api.sign_out().ok
        assert api.token is None
        assert api.get_workspace().error.kind == ErrorKind.UNAUTHENTICATED


class TestRevalidation:

    def test_listener_fires_after_successful_mutation(self, api):
        _signed_in(api)
        calls = []
        api.on_revalidate(lambda: calls.append(1))
        api.create_folder("Work")
        assert calls == [1]

    def test_listener_not_fired_on_failure_or_read(self, api):
        _signed_in(api)
        calls = []
        api.on_revalidate(lambda: calls.append(1))
        api.create_folder("")
        api.list_folders()
        assert calls == []


class TestTransportFailures:

    def test_transport_error_becomes_data_error(self):
        http = MagicMock(spec=httpx.Client)
        http.request.side_effect = httpx.ConnectError("connection refused")
        result = ActionsClient(http=http).list_folders()
        assert result.error.kind == ErrorKind.DATA
        assert "connection refused" in result.error.message

    def test_non_json_error_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
        http = httpx.Client(transport=transport, base_url="http://api")
        result = ActionsClient(http=http).list_folders()
        assert result.error.kind == ErrorKind.DATA
        assert "502" in result.error.message

    def test_invalid_helper(self):
        result = ActionResult.invalid("Please select a folder", field="folder_id")
        assert not result.ok
        assert result.error.kind == ErrorKind.VALIDATION
