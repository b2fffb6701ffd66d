"""End-to-end tests for the studio and the public artist page."""

import pytest

from tests.conftest import bearer_for, make_remote_user, signup_artist, superadmin
from tests.harness import create_client_fixture


client = create_client_fixture()


@pytest.fixture
def artist_headers(client):
    """Headers of a freshly signed-up artist with slug ``jane``."""
    artist = signup_artist(client, bearer_for(superadmin()), "jane@example.com", "jane")
    return bearer_for(artist)


class TestStudioAccess:
    def test_anonymous(self, client):
        assert client.get("/studio/portfolio").status_code == 401

    def test_superadmin_has_no_studio(self, client):
        response = client.get("/studio/prices", headers=bearer_for(superadmin()))

        assert response.status_code == 403
        assert "portfolio" in response.json()["error"]

    def test_first_visit_creates_portfolio(self, client):
        """A user without a portfolio gets one derived from their email."""
        headers = bearer_for(make_remote_user("mary.smith@example.com"))

        response = client.get("/studio/portfolio", headers=headers)

        assert response.status_code == 200
        assert response.json()["portfolio"]["slug"] == "mary-smith"


class TestStudioPortfolio:
    def test_update_and_slug_checks(self, client, artist_headers):
        # Own slug is current
        own = client.get(
            "/studio/check-slug", params={"slug": "jane"}, headers=artist_headers
        )
        assert own.json() == {"slug": "jane", "available": True, "is_current": True}

        # Rename
        updated = client.patch(
            "/studio/portfolio",
            json={"slug": "jane-paints", "accent_color": "blue"},
            headers=artist_headers,
        )
        assert updated.status_code == 200
        assert updated.json()["portfolio"]["slug"] == "jane-paints"
        assert updated.json()["portfolio"]["accent_color"] == "blue"

        assert client.get("/artists/jane").status_code == 404
        assert client.get("/artists/jane-paints").status_code == 200

    def test_reserved_slug_is_a_field_error(self, client, artist_headers):
        response = client.patch(
            "/studio/portfolio", json={"slug": "pricing"}, headers=artist_headers
        )

        assert response.status_code == 400
        assert response.json() == {"error": "This slug is reserved", "field": "slug"}


class TestStudioPrices:
    def test_price_crud_and_public_view(self, client, artist_headers):
        # Create
        sketch = client.post(
            "/studio/prices",
            json={"title": "Sketch", "price": "25.00", "description": "Pencil"},
            headers=artist_headers,
        )
        assert sketch.status_code == 201
        retired = client.post(
            "/studio/prices",
            json={"title": "Mural", "price": 900, "active": False},
            headers=artist_headers,
        )
        assert retired.json()["position"] == 1

        # Update
        price_id = sketch.json()["id"]
        patched = client.patch(
            f"/studio/prices/{price_id}", json={"price": "30"}, headers=artist_headers
        )
        assert patched.status_code == 200
        assert float(patched.json()["price"]) == 30

        # Studio sees both, the public page only the active one
        studio = client.get("/studio/prices", headers=artist_headers).json()["prices"]
        assert [p["title"] for p in studio] == ["Sketch", "Mural"]
        public = client.get("/artists/jane").json()["prices"]
        assert [p["title"] for p in public] == ["Sketch"]

        # Delete
        deleted = client.delete(f"/studio/prices/{price_id}", headers=artist_headers)
        assert deleted.status_code == 204
        missing = client.delete(f"/studio/prices/{price_id}", headers=artist_headers)
        assert missing.status_code == 404
        assert missing.json() == {"error": "Price not found"}

    def test_missing_fields(self, client, artist_headers):
        response = client.post(
            "/studio/prices", json={"title": "Sketch"}, headers=artist_headers
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Missing title or price"}

    def test_negative_price(self, client, artist_headers):
        response = client.post(
            "/studio/prices", json={"title": "Sketch", "price": "-5"}, headers=artist_headers
        )

        assert response.status_code == 400
        assert response.json()["field"] == "price"

    def test_other_artist_cannot_edit(self, client, artist_headers):
        price = client.post(
            "/studio/prices", json={"title": "Sketch", "price": 10}, headers=artist_headers
        ).json()
        intruder = bearer_for(make_remote_user("intruder@example.com"))

        response = client.patch(
            f"/studio/prices/{price['id']}", json={"price": 0}, headers=intruder
        )

        assert response.status_code == 403


class TestStudioLinks:
    def test_link_crud_and_public_view(self, client, artist_headers):
        shop = client.post(
            "/studio/links",
            json={"title": "Shop", "url": "https://shop.example.com"},
            headers=artist_headers,
        )
        assert shop.status_code == 201
        client.post(
            "/studio/links",
            json={"title": "Drafts", "url": "https://drafts.example.com", "is_public": False},
            headers=artist_headers,
        )

        renamed = client.patch(
            f"/studio/links/{shop.json()['id']}",
            json={"title": "Store"},
            headers=artist_headers,
        )
        assert renamed.json()["title"] == "Store"

        public = client.get("/artists/jane").json()["links"]
        assert [link["title"] for link in public] == ["Store"]

        studio = client.get("/studio/links", headers=artist_headers).json()["links"]
        assert len(studio) == 2

        deleted = client.delete(
            f"/studio/links/{shop.json()['id']}", headers=artist_headers
        )
        assert deleted.status_code == 204

    def test_missing_url(self, client, artist_headers):
        response = client.post(
            "/studio/links", json={"title": "Shop"}, headers=artist_headers
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Title and URL are required"}
