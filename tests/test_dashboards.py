"""Tests for dashboard and pane endpoints."""

import asyncpg

DASHBOARD_ROW = {"dashboard_id": 3, "user_id": 1, "name": "Main"}
API_ROW = {
    "api_id": 1,
    "user_id": 1,
    "api_name": "Weather",
    "api_string": "https://weather.example",
    "api_key": "",
    "graph_type": "bar",
    "pane_x": 0,
    "pane_y": 1,
}


class TestDashboardCrud:
    def test_create(self, client, fake_db, prefix):
        fake_db.on("INSERT INTO dashboards", dict(DASHBOARD_ROW))

        resp = client.post(f"{prefix}/createDashboard", json={"userId": 1, "name": "Main"})

        assert resp.status_code == 200
        assert resp.json() == {"id": 3, "userId": 1, "name": "Main"}

    def test_create_for_unknown_user(self, client, fake_db, prefix):
        fake_db.on("INSERT INTO dashboards", asyncpg.ForeignKeyViolationError("fk_user"))

        resp = client.post(f"{prefix}/createDashboard", json={"userId": 99, "name": "Main"})

        assert resp.status_code == 404

    def test_create_requires_name(self, client, prefix):
        resp = client.post(f"{prefix}/createDashboard", json={"userId": 1})

        assert resp.status_code == 400

    def test_list_for_user(self, client, fake_db, prefix):
        fake_db.on("FROM dashboards", [DASHBOARD_ROW, {**DASHBOARD_ROW, "dashboard_id": 4, "name": "Ops"}])

        resp = client.get(f"{prefix}/dashboards/user/1")

        assert resp.status_code == 200
        assert [d["name"] for d in resp.json()] == ["Main", "Ops"]
        assert fake_db.args_for("FROM dashboards")[0] == (1,)

    def test_get_with_panes_and_parameters(self, client, fake_db, prefix):
        fake_db.on("FROM dashboards", dict(DASHBOARD_ROW))
        fake_db.on("JOIN dashboard_panes", [API_ROW])
        fake_db.on("FROM parameters", [{"api_id": 1, "parameter": "city"}])

        resp = client.get(f"{prefix}/dashboards/3")

        assert resp.status_code == 200
        body = resp.json()
        assert body["id"] == 3 and body["name"] == "Main"
        assert len(body["panes"]) == 1
        assert body["panes"][0]["apiId"] == 1
        assert body["panes"][0]["parameters"] == [{"parameter": "city"}]

    def test_get_without_panes(self, client, fake_db, prefix):
        fake_db.on("FROM dashboards", dict(DASHBOARD_ROW))

        resp = client.get(f"{prefix}/dashboards/3")

        assert resp.status_code == 200
        assert resp.json()["panes"] == []

    def test_get_missing(self, client, prefix):
        resp = client.get(f"{prefix}/dashboards/3")

        assert resp.status_code == 404
        assert resp.json() == {"error": "Dashboard not found."}

    def test_rename(self, client, fake_db, prefix):
        fake_db.on("UPDATE dashboards", {**DASHBOARD_ROW, "name": "Renamed"})

        resp = client.put(f"{prefix}/dashboards/3", json={"name": "Renamed"})

        assert resp.status_code == 200
        assert resp.json() == {"id": 3, "userId": 1, "name": "Renamed"}

    def test_rename_missing(self, client, prefix):
        resp = client.put(f"{prefix}/dashboards/3", json={"name": "Renamed"})

        assert resp.status_code == 404

    def test_delete(self, client, fake_db, prefix):
        fake_db.on("DELETE FROM dashboards", "DELETE 1")

        resp = client.delete(f"{prefix}/dashboards/3")

        assert resp.status_code == 200
        assert resp.json() == {"message": "Dashboard deleted successfully"}
        # APIs are independently owned and never touched by a dashboard delete.
        assert not any("apis" in sql for sql in fake_db.statements())

    def test_delete_missing(self, client, fake_db, prefix):
        fake_db.on("DELETE FROM dashboards", "DELETE 0")

        resp = client.delete(f"{prefix}/dashboards/3")

        assert resp.status_code == 404


class TestPanes:
    def test_add_pane(self, client, fake_db, prefix):
        fake_db.on("INSERT INTO dashboard_panes", {"dashboard_pane_id": 10})

        resp = client.post(f"{prefix}/dashboards/3/panes", json={"apiId": 1})

        assert resp.status_code == 200
        assert resp.json() == {"message": "Pane added to dashboard successfully"}
        assert fake_db.args_for("INSERT INTO dashboard_panes")[0] == (3, 1)

    def test_add_existing_pane_is_idempotent(self, client, fake_db, prefix):
        resp = client.post(f"{prefix}/dashboards/3/panes", json={"apiId": 1})

        assert resp.status_code == 200
        assert resp.json() == {"message": "Pane already on dashboard"}

    def test_add_pane_with_unknown_reference(self, client, fake_db, prefix):
        fake_db.on("INSERT INTO dashboard_panes", asyncpg.ForeignKeyViolationError("fk_api"))

        resp = client.post(f"{prefix}/dashboards/3/panes", json={"apiId": 99})

        assert resp.status_code == 404
        assert resp.json() == {"error": "Dashboard or API not found."}

    def test_add_pane_requires_api_id(self, client, prefix):
        resp = client.post(f"{prefix}/dashboards/3/panes", json={})

        assert resp.status_code == 400

    def test_remove_pane(self, client, fake_db, prefix):
        fake_db.on("DELETE FROM dashboard_panes", "DELETE 1")

        resp = client.delete(f"{prefix}/dashboards/3/panes/1")

        assert resp.status_code == 200
        assert fake_db.args_for("DELETE FROM dashboard_panes")[0] == (3, 1)

    def test_remove_missing_pane(self, client, fake_db, prefix):
        fake_db.on("DELETE FROM dashboard_panes", "DELETE 0")

        resp = client.delete(f"{prefix}/dashboards/3/panes/1")

        assert resp.status_code == 404


class TestDashboardInputBounds:
    def test_blank_name_rejected_on_create(self, client, fake_db, prefix):
        resp = client.post(f"{prefix}/createDashboard", json={"userId": 1, "name": "  "})

        assert resp.status_code == 400
        assert fake_db.calls == []

    def test_blank_name_rejected_on_rename(self, client, fake_db, prefix):
        resp = client.put(f"{prefix}/dashboards/3", json={"name": ""})

        assert resp.status_code == 400
        assert fake_db.calls == []

    def test_pane_api_id_beyond_int32_rejected(self, client, fake_db, prefix):
        resp = client.post(f"{prefix}/dashboards/3/panes", json={"apiId": 2**40})

        assert resp.status_code == 400
        assert fake_db.calls == []

    def test_path_ids_bounded(self, client, fake_db, prefix):
        for path in (
            f"/dashboards/{2**31}",
            "/dashboards/0",
            f"/dashboards/user/{2**35}",
        ):
            assert client.get(f"{prefix}{path}").status_code == 400
        assert client.delete(f"{prefix}/dashboards/3/panes/{2**32}").status_code == 400
        assert fake_db.calls == []
