"""End-to-end tests for terms and agreement endpoints."""

from lending.interface.api.auth import AUTH_COOKIE
from tests.factories import make_user, token_for


def _publish(client, name: str, is_required: bool = True) -> int:
    response = client.post(
        "/terms",
        json={
            "name": name,
            "terms_detail_url": f"https://example.com/{name}",
            "is_required": is_required,
        },
    )
    assert response.status_code == 201
    return response.json()["terms_id"]


class TestTermsCatalogue:
    """End-to-end tests for terms management."""

    def test_list_is_public(self, client):
        """Should list terms without a session."""
        # Act
        response = client.get("/terms")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"terms": []}

    def test_create_requires_admin(self, client):
        """Should return 403 for a regular user."""
        # Arrange
        client.cookies.set(AUTH_COOKIE, token_for(make_user("user_1")))

        # Act
        response = client.post(
            "/terms", json={"name": "Privacy", "terms_detail_url": "https://x"}
        )

        # Assert
        assert response.status_code == 403

    def test_create_missing_url(self, as_admin):
        """Should return 422 when the detail URL is missing."""
        # Act
        response = as_admin.post("/terms", json={"name": "Privacy"})

        # Assert
        assert response.status_code == 422

    def test_update_and_delete(self, as_admin):
        """Should update terms and then hide them once deleted."""
        # Arrange
        terms_id = _publish(as_admin, "privacy")

        # Act
        updated = as_admin.patch(f"/terms/{terms_id}", json={"version": "2.0"})
        deleted = as_admin.delete(f"/terms/{terms_id}")

        # Assert
        assert updated.status_code == 200
        assert updated.json()["version"] == "2.0"
        assert updated.json()["name"] == "privacy"
        assert deleted.status_code == 200
        assert as_admin.get(f"/terms/{terms_id}").status_code == 404
        assert as_admin.get("/terms").json()["terms"] == []


class TestTermsAgreements:
    """End-to-end tests for the agreement workflow."""

    def test_agreements_require_session(self, client):
        """Should return 401 without a session cookie."""
        # Act
        response = client.post("/terms/agreements", json={"terms_ids": [1]})

        # Assert
        assert response.status_code == 401

    def test_agreement_flow(self, as_admin):
        """Status should flip once every required terms is agreed."""
        # Arrange
        required_id = _publish(as_admin, "service")
        optional_id = _publish(as_admin, "marketing", is_required=False)
        as_admin.cookies.set(AUTH_COOKIE, token_for(make_user("user_1")))

        # Act
        before = as_admin.get("/terms/agreements/me/status").json()
        agreed = as_admin.post(
            "/terms/agreements", json={"terms_ids": [required_id, optional_id]}
        )
        after = as_admin.get("/terms/agreements/me/status").json()
        mine = as_admin.get("/terms/agreements/me").json()

        # Assert
        assert before["has_agreed_to_all_required"] is False
        assert [t["terms_id"] for t in before["missing_required_terms"]] == [
            required_id
        ]
        assert agreed.status_code == 201
        assert after == {"has_agreed_to_all_required": True, "missing_required_terms": []}
        assert [a["terms"]["terms_id"] for a in mine["agreements"]] == [
            required_id,
            optional_id,
        ]

    def test_resubmission_replaces_set(self, as_admin):
        """A new submission should supersede the previous agreements."""
        # Arrange
        required_id = _publish(as_admin, "service")
        optional_id = _publish(as_admin, "marketing", is_required=False)
        as_admin.cookies.set(AUTH_COOKIE, token_for(make_user("user_1")))
        as_admin.post("/terms/agreements", json={"terms_ids": [required_id]})

        # Act
        as_admin.post("/terms/agreements", json={"terms_ids": [optional_id]})
        status = as_admin.get("/terms/agreements/me/status").json()

        # Assert
        assert status["has_agreed_to_all_required"] is False

    def test_unknown_terms_leaves_set_untouched(self, as_admin):
        """Should return 404 and keep the current agreements."""
        # Arrange
        required_id = _publish(as_admin, "service")
        as_admin.cookies.set(AUTH_COOKIE, token_for(make_user("user_1")))
        as_admin.post("/terms/agreements", json={"terms_ids": [required_id]})

        # Act
        response = as_admin.post(
            "/terms/agreements", json={"terms_ids": [required_id, 999]}
        )

        # Assert
        assert response.status_code == 404
        status = as_admin.get("/terms/agreements/me/status").json()
        assert status["has_agreed_to_all_required"] is True
