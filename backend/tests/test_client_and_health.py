"""
Publication Assistant Backend - Client Router and Health Tests
===============================================================

What:  Tests for the client route-group manifest, the navigation shell,
       deep links, the static client module, the health probe, response
       headers and the access log.
"""

import logging

import pytest

from pubassist.routes.client import CLIENT_ROUTE_GROUPS, find_route_group

EXPECTED_GROUPS = ["publications", "faculties", "institutes", "divisions", "journals"]


class TestClientRouteGroups:

    def test_groups_declared(self):
        assert [g.name for g in CLIENT_ROUTE_GROUPS] == EXPECTED_GROUPS

    def test_find_route_group(self):
        assert find_route_group("/journals").name == "journals"
        assert find_route_group("/divisions/12/edit").name == "divisions"
        assert find_route_group("/journalsx") is None
        assert find_route_group("/unknown") is None

    @pytest.mark.asyncio
    async def test_manifest(self, test_client):
        response = await test_client.get("/api/client/routes")

        assert response.status_code == 200
        body = response.json()
        assert body["module"] == "app"
        assert [g["name"] for g in body["groups"]] == EXPECTED_GROUPS

    @pytest.mark.asyncio
    async def test_shell_links_every_group(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        for group in CLIENT_ROUTE_GROUPS:
            assert f'href="#!{group.path}"' in response.text

    @pytest.mark.asyncio
    async def test_deep_link_serves_shell(self, test_client):
        response = await test_client.get("/journals/12")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'ng-app="app"' in response.text

    @pytest.mark.asyncio
    async def test_deep_link_outside_groups_not_found(self, test_client):
        response = await test_client.get("/journalsx/12")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_unknown_api_path_not_found(self, test_client):
        response = await test_client.get("/api/Nothing")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_static_module_declares_groups(self, test_client):
        response = await test_client.get("/static/app/app.module.js")

        assert response.status_code == 200
        for name in EXPECTED_GROUPS:
            assert f'angular.module("{name}"' in response.text


class TestHealthAndHeaders:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api/Journals", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/Journals")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_access_log_record(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="pubassist.access")

        await test_client.get("/api/Journals", headers={"X-Request-ID": "log12345"})

        records = [r for r in caplog.records if r.name == "pubassist.access"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].getMessage().startswith("GET /api/Journals 200 ")
        assert "[log12345]" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_health_not_access_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="pubassist.access")

        await test_client.get("/health")

        assert not [r for r in caplog.records if r.name == "pubassist.access"]
