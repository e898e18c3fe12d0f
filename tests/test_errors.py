from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app import create_app

API = "/api/v1"


class TestErrorTranslation:

    def test_unknown_route_uses_envelope(self, client):
        resp = client.get(f"{API}/nowhere")
        assert resp.status_code == 404
        body = resp.get_json()
        assert body["success"] is False
        assert "data" not in body

    def test_wrong_verb_uses_envelope(self, client):
        resp = client.get(f"{API}/hotels/create")
        assert resp.status_code == 405
        assert resp.get_json()["success"] is False

    def test_hotels_have_no_get_by_id_route(self, client, hotel):
        resp = client.get(f"{API}/hotels/get/{hotel['id']}")
        assert resp.status_code == 404

    def test_non_object_body_is_rejected(self, client):
        resp = client.post(f"{API}/hotels/create", data="[1, 2]", content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Request body must be a JSON object"

    def test_unhandled_exception_hides_details(self):
        app = create_app(SQLALCHEMY_DATABASE_URI="sqlite://", TESTING=True, LOG_LEVEL="WARNING")

        @app.get("/boom")
        def boom():
            raise RuntimeError("secret internals")

        resp = app.test_client().get("/boom")
        assert resp.status_code == 500
        body = resp.get_json()
        assert body == {"success": False, "message": "An unexpected error occurred"}

    def test_persistence_failure_maps_to_500(self, client, monkeypatch):
        def broken_commit(session):
            raise OperationalError("INSERT INTO hotels", {}, Exception("disk I/O error"))

        monkeypatch.setattr(Session, "commit", broken_commit)
        resp = client.post(
            f"{API}/hotels/create",
            json={"name": "Plaza", "location": "NYC", "rating": 4.5, "description": "x"},
        )

        assert resp.status_code == 500
        body = resp.get_json()
        assert body["message"] == "Failed to create hotel"
        assert "disk I/O" not in body["message"]
