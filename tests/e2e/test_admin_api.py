"""End-to-end tests for superadmin user management."""

import pytest

from folio.domain.service import IdentityProviderClient
from tests.conftest import bearer_for, signup_artist, superadmin
from tests.harness import create_client_fixture, resolve


client = create_client_fixture()


@pytest.fixture
def admin():
    return superadmin()


class TestAdminUsers:
    """Tests for /admin/users."""

    def test_list_users(self, client, admin):
        artist = signup_artist(client, bearer_for(admin), "jane@example.com", "jane")

        response = client.get("/admin/users", headers=bearer_for(admin))

        assert response.status_code == 200
        users = {u["id"]: u for u in response.json()["users"]}
        assert users[str(artist.id)]["role"] == "ARTIST"
        assert users[str(artist.id)]["status"] == "ACTIVE"
        assert users[str(artist.id)]["display_name"] == "Jane"

    def test_artist_cannot_list_users(self, client, admin):
        artist = signup_artist(client, bearer_for(admin), "jane@example.com", "jane")

        response = client.get("/admin/users", headers=bearer_for(artist))

        assert response.status_code == 403

    def test_deactivated_user_is_locked_out(self, client, admin):
        # Arrange
        artist = signup_artist(client, bearer_for(admin), "jane@example.com", "jane")
        artist_headers = bearer_for(artist)
        assert client.get("/studio/portfolio", headers=artist_headers).status_code == 200

        # Act
        response = client.patch(
            f"/admin/users/{artist.id}",
            json={"action": "deactivate"},
            headers=bearer_for(admin),
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "DEACTIVATED"
        locked = client.get("/studio/portfolio", headers=artist_headers)
        assert locked.status_code == 401
        assert locked.json() == {"error": "Account is not active"}

        reactivated = client.patch(
            f"/admin/users/{artist.id}",
            json={"action": "activate"},
            headers=bearer_for(admin),
        )
        assert reactivated.json()["status"] == "ACTIVE"
        assert client.get("/studio/portfolio", headers=artist_headers).status_code == 200

    def test_update_role_requires_known_role(self, client, admin):
        artist = signup_artist(client, bearer_for(admin), "jane@example.com", "jane")

        response = client.patch(
            f"/admin/users/{artist.id}",
            json={"action": "update_role", "role": "owner"},
            headers=bearer_for(admin),
        )

        assert response.status_code == 400
        assert response.json()["field"] == "role"

    def test_delete_user(self, client, admin):
        artist = signup_artist(client, bearer_for(admin), "jane@example.com", "jane")

        response = client.delete(f"/admin/users/{artist.id}", headers=bearer_for(admin))

        assert response.status_code == 204
        assert client.get("/studio/portfolio", headers=bearer_for(artist)).status_code == 401
        again = client.delete(f"/admin/users/{artist.id}", headers=bearer_for(admin))
        assert again.status_code == 404
        assert again.json() == {"error": "User not found"}

    def test_failed_remote_delete_leaves_user_intact(self, client, admin):
        # Arrange
        artist = signup_artist(client, bearer_for(admin), "jane@example.com", "jane")
        resolve(client, IdentityProviderClient).fail_on_delete = True

        # Act
        response = client.delete(f"/admin/users/{artist.id}", headers=bearer_for(admin))

        # Assert
        assert response.status_code == 502
        studio = client.get("/studio/portfolio", headers=bearer_for(artist))
        assert studio.status_code == 200
        listed = client.get("/admin/users", headers=bearer_for(admin)).json()["users"]
        by_id = {u["id"]: u for u in listed}
        assert by_id[str(artist.id)]["status"] == "ACTIVE"

    def test_cannot_delete_self(self, client, admin):
        response = client.delete(f"/admin/users/{admin.id}", headers=bearer_for(admin))

        assert response.status_code == 400
        assert response.json() == {"error": "You cannot delete your own account"}

    def test_unknown_user(self, client, admin):
        response = client.patch(
            "/admin/users/not-a-uuid",
            json={"action": "activate"},
            headers=bearer_for(admin),
        )

        assert response.status_code == 404
