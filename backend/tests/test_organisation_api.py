"""
Publication Assistant Backend - Organisation Unit Endpoint Tests
=================================================================

What:  HTTP-level tests for faculties, institutes and divisions.

What we test:
    ✅ Division creation with an existing institute persists and is listed
    ✅ Division creation with an unknown institute → 412, nothing persisted
    ✅ Institute creation with an unknown faculty → 412
    ✅ Divisions scoped to an institute; institutes scoped to a faculty
    ✅ Division update re-resolves the institute
    ✅ A store failure answers a generic 500 and leaves the rows in place
"""

import pytest

from pubassist.models import Division, Faculty, Institute


@pytest.fixture
def hierarchy(seed):
    """Two faculties, two institutes in the first, divisions in one institute."""

    async def _seed():
        electronics, physics = await seed(Faculty(name="Electronics"), Faculty(name="Physics"))
        telecom, radio = await seed(
            Institute(name="Telecommunications", faculty_id=electronics.id),
            Institute(name="Radioelectronics", faculty_id=electronics.id),
        )
        await seed(
            Division(name="Networks", institute_id=telecom.id),
            Division(name="Signal Processing", institute_id=telecom.id),
        )
        return {
            "electronics": electronics,
            "physics": physics,
            "telecom": telecom,
            "radio": radio,
        }

    return _seed


class TestDivisions:

    @pytest.mark.asyncio
    async def test_add_division(self, test_client, hierarchy):
        units = await hierarchy()

        response = await test_client.post(
            "/api/Divisions",
            json={"name": "Antennas", "institute_id": units["radio"].id},
        )

        assert response.status_code == 201
        created = response.json()
        assert created["id"] is not None
        assert created["institute_id"] == units["radio"].id

        listed = (await test_client.get("/api/Divisions")).json()
        assert created in listed

    @pytest.mark.asyncio
    async def test_add_division_unknown_institute(self, test_client, hierarchy):
        await hierarchy()
        before = (await test_client.get("/api/Divisions")).json()

        response = await test_client.post(
            "/api/Divisions",
            json={"name": "Orphan", "institute_id": 999},
        )

        assert response.status_code == 412
        assert response.json()["error"] == "precondition_failed"
        assert (await test_client.get("/api/Divisions")).json() == before

    @pytest.mark.asyncio
    async def test_add_division_without_body(self, test_client):
        response = await test_client.post("/api/Divisions")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_divisions_in_institute(self, test_client, hierarchy):
        units = await hierarchy()

        response = await test_client.get(f"/api/Institute/{units['telecom'].id}/Divisions")

        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Networks", "Signal Processing"]
        assert all(d["institute_id"] == units["telecom"].id for d in response.json())

    @pytest.mark.asyncio
    async def test_divisions_in_institute_without_divisions(self, test_client, hierarchy):
        units = await hierarchy()

        response = await test_client.get(f"/api/Institute/{units['radio'].id}/Divisions")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_update_division_moves_institute(self, test_client, hierarchy):
        units = await hierarchy()
        networks = (await test_client.get(f"/api/Institute/{units['telecom'].id}/Divisions")).json()[0]

        response = await test_client.patch(
            "/api/Divisions",
            json={"id": networks["id"], "name": "Wireless Networks", "institute_id": units["radio"].id},
        )

        assert response.status_code == 200
        moved = (await test_client.get(f"/api/Institute/{units['radio'].id}/Divisions")).json()
        assert [d["name"] for d in moved] == ["Wireless Networks"]

    @pytest.mark.asyncio
    async def test_update_division_unknown_institute(self, test_client, hierarchy):
        units = await hierarchy()
        networks = (await test_client.get(f"/api/Institute/{units['telecom'].id}/Divisions")).json()[0]

        response = await test_client.patch(
            "/api/Divisions",
            json={"id": networks["id"], "name": "Networks", "institute_id": 999},
        )

        assert response.status_code == 412
        fetched = (await test_client.get(f"/api/Divisions/{networks['id']}")).json()
        assert fetched["institute_id"] == units["telecom"].id

    @pytest.mark.asyncio
    async def test_delete_division(self, test_client, hierarchy):
        units = await hierarchy()
        networks = (await test_client.get(f"/api/Institute/{units['telecom'].id}/Divisions")).json()[0]

        first = await test_client.delete(f"/api/Divisions/{networks['id']}")
        second = await test_client.delete(f"/api/Divisions/{networks['id']}")

        assert first.status_code == 204
        assert second.status_code == 204
        assert (await test_client.get(f"/api/Divisions/{networks['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_search_divisions(self, test_client, hierarchy):
        await hierarchy()

        response = await test_client.get("/api/Divisions/Like/Signal")

        assert [d["name"] for d in response.json()] == ["Signal Processing"]


class TestInstitutesAndFaculties:

    @pytest.mark.asyncio
    async def test_add_institute(self, test_client, hierarchy):
        units = await hierarchy()

        response = await test_client.post(
            "/api/Institutes",
            json={"name": "Nuclear Physics", "faculty_id": units["physics"].id},
        )

        assert response.status_code == 201
        assert response.json()["faculty_id"] == units["physics"].id

    @pytest.mark.asyncio
    async def test_add_institute_unknown_faculty(self, test_client):
        response = await test_client.post(
            "/api/Institutes",
            json={"name": "Nowhere", "faculty_id": 999},
        )

        assert response.status_code == 412
        assert (await test_client.get("/api/Institutes")).json() == []

    @pytest.mark.asyncio
    async def test_institutes_in_faculty(self, test_client, hierarchy):
        units = await hierarchy()

        electronics = await test_client.get(f"/api/Faculty/{units['electronics'].id}/Institutes")
        physics = await test_client.get(f"/api/Faculty/{units['physics'].id}/Institutes")

        assert [i["name"] for i in electronics.json()] == ["Telecommunications", "Radioelectronics"]
        assert physics.json() == []

    @pytest.mark.asyncio
    async def test_faculty_crud(self, test_client):
        created = (await test_client.post("/api/Faculties", json={"name": "Chemistry"})).json()

        updated = await test_client.patch(
            "/api/Faculties",
            json={"id": created["id"], "name": "Chemical Engineering"},
        )
        assert updated.json() == {"id": created["id"], "name": "Chemical Engineering"}

        assert (await test_client.delete(f"/api/Faculties/{created['id']}")).status_code == 204
        assert (await test_client.get("/api/Faculties")).json() == []

    @pytest.mark.asyncio
    async def test_faculty_not_found(self, test_client):
        response = await test_client.get("/api/Faculties/12")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_faculty_with_institutes_is_server_error(self, test_client, hierarchy):
        units = await hierarchy()
        telecom_id = units["telecom"].id

        response = await test_client.delete(f"/api/Faculties/{units['electronics'].id}")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert body["message"] == "An internal error occurred. Please try again later."
        assert "details" not in body
        for fragment in ("SELECT", "DELETE", "UPDATE", "institutes", "faculties"):
            assert fragment not in response.text

        still_there = await test_client.get(f"/api/Institutes/{telecom_id}")
        assert still_there.status_code == 200
        assert still_there.json()["faculty_id"] == units["electronics"].id
        assert (await test_client.get(f"/api/Faculties/{units['electronics'].id}")).status_code == 200
