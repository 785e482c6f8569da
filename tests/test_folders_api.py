"""Tests for folder CRUD endpoints and ownership scoping."""


class TestCreateFolder:

    def test_create_folder(self, client, auth_headers):
        resp = client.post("/api/folders", json={"name": "Work", "color": "#3b82f6"}, headers=auth_headers)
        assert resp.status_code == 201
        data = resp.json()
        assert data["name"] == "Work"
        assert data["color"] == "#3b82f6"
        assert data["id"]

    def test_missing_color_gets_default(self, client, auth_headers):
        resp = client.post("/api/folders", json={"name": "Ideas"}, headers=auth_headers)
        assert resp.json()["color"] == "#6366f1"

    def test_blank_color_gets_default(self, client, auth_headers):
        resp = client.post("/api/folders", json={"name": "Ideas", "color": ""}, headers=auth_headers)
        assert resp.json()["color"] == "#6366f1"

    def test_blank_name_rejected(self, client, auth_headers):
        resp = client.post("/api/folders", json={"name": "   "}, headers=auth_headers)
        assert resp.status_code == 400
        body = resp.json()
        assert body["error"] == "VALIDATION_ERROR"
        assert body["message"] == "Folder name is required"
        assert client.get("/api/folders", headers=auth_headers).json() == []


class TestListFolders:

    def test_list_in_creation_order(self, client, auth_headers, make_folder):
        for name in ("B", "A", "C"):
            make_folder(auth_headers, name=name)
        names = [f["name"] for f in client.get("/api/folders", headers=auth_headers).json()]
        assert names == ["B", "A", "C"]

    def test_list_only_own_folders(self, client, auth_headers, other_headers, make_folder):
        make_folder(auth_headers, name="Mine")
        make_folder(other_headers, name="Theirs")
        names = [f["name"] for f in client.get("/api/folders", headers=auth_headers).json()]
        assert names == ["Mine"]


class TestUpdateFolder:

    def test_rename_and_recolor(self, client, auth_headers, make_folder):
        folder = make_folder(auth_headers)
        resp = client.put(
            f"/api/folders/{folder['id']}",
            json={"name": "Office", "color": "#ef4444"},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        assert resp.json()["name"] == "Office"
        assert resp.json()["color"] == "#ef4444"
        assert resp.json()["created_at"] == folder["created_at"]

    def test_partial_update_keeps_other_fields(self, client, auth_headers, make_folder):
        folder = make_folder(auth_headers)
        resp = client.put(f"/api/folders/{folder['id']}", json={"name": "Office"}, headers=auth_headers)
        assert resp.json()["color"] == "#3b82f6"

    def test_update_missing_folder_is_404(self, client, auth_headers):
        resp = client.put("/api/folders/nope", json={"name": "X"}, headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json()["error"] == "FOLDER_NOT_FOUND"


class TestOwnership:

    def test_foreign_folder_get_update_delete_fail(self, client, auth_headers, other_headers, make_folder):
        folder = make_folder(auth_headers, name="Private")
        fid = folder["id"]

        assert client.get(f"/api/folders/{fid}", headers=other_headers).status_code == 404
        assert client.put(f"/api/folders/{fid}", json={"name": "Hacked"}, headers=other_headers).status_code == 404
        assert client.delete(f"/api/folders/{fid}", headers=other_headers).status_code == 404

        unchanged = client.get(f"/api/folders/{fid}", headers=auth_headers).json()
        assert unchanged["name"] == "Private"


class TestDeleteFolder:

    def test_delete_folder(self, client, auth_headers, make_folder):
        folder = make_folder(auth_headers)
        resp = client.delete(f"/api/folders/{folder['id']}", headers=auth_headers)
        assert resp.status_code == 204
        assert client.get("/api/folders", headers=auth_headers).json() == []

    def test_delete_cascades_to_prompts(self, client, auth_headers, make_folder, make_prompt):
        work = make_folder(auth_headers, name="Work")
        keep = make_folder(auth_headers, name="Keep")
        make_prompt(auth_headers, work["id"], title="One")
        make_prompt(auth_headers, work["id"], title="Two")
        kept = make_prompt(auth_headers, keep["id"], title="Three")

        client.delete(f"/api/folders/{work['id']}", headers=auth_headers)

        prompts = client.get("/api/prompts", headers=auth_headers).json()
        assert [p["id"] for p in prompts] == [kept["id"]]

    def test_delete_twice_is_404(self, client, auth_headers, make_folder):
        folder = make_folder(auth_headers)
        client.delete(f"/api/folders/{folder['id']}", headers=auth_headers)
        assert client.delete(f"/api/folders/{folder['id']}", headers=auth_headers).status_code == 404
