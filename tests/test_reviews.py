API = "/api/v1/reviews"


def _payload(user, hotel, **overrides):
    payload = {
        "user_id": user["id"],
        "hotel_id": hotel["id"],
        "rating": 4,
        "comment": "Lovely stay",
        "review_date": "2024-01-01",
    }
    payload.update(overrides)
    return payload


class TestCreateReview:

    def test_create(self, client, user, hotel):
        resp = client.post(f"{API}/create", json=_payload(user, hotel))
        assert resp.status_code == 201
        assert resp.get_json()["data"]["review_date"] == "2024-01-01"

    def test_rating_range_is_checked_before_lookups(self, client):
        resp = client.post(f"{API}/create", json={
            "user_id": 1, "hotel_id": 1, "rating": 7, "comment": "x", "review_date": "2024-01-01",
        })
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Rating must be between 0 and 5"

    def test_zero_rating_counts_as_missing(self, client, user, hotel):
        resp = client.post(f"{API}/create", json=_payload(user, hotel, rating=0))
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "rating is required"

    def test_unknown_hotel(self, client, user, hotel):
        resp = client.post(f"{API}/create", json=_payload(user, hotel, hotel_id=999))
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Hotel not found"

    def test_one_review_per_user_and_hotel(self, client, user, hotel):
        client.post(f"{API}/create", json=_payload(user, hotel))
        resp = client.post(f"{API}/create", json=_payload(user, hotel, comment="Again"))
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Review already exists for this user and hotel"

    def test_extra_field_is_named(self, client, user, hotel):
        resp = client.post(f"{API}/create", json=_payload(user, hotel, title="Great"))
        assert resp.status_code == 400
        assert "Unexpected fields provided: title" in resp.get_json()["message"]


class TestReadReview:

    def test_empty_list_is_not_found(self, client):
        resp = client.get(f"{API}/getAll")
        assert resp.status_code == 404
        assert resp.get_json() == {"success": False, "message": "No reviews found"}

    def test_get_by_id_includes_relations(self, client, user, hotel):
        review = client.post(f"{API}/create", json=_payload(user, hotel)).get_json()["data"]
        resp = client.get(f"{API}/get/{review['id']}")
        assert resp.status_code == 200
        data = resp.get_json()["data"]
        assert data["user"]["id"] == user["id"]
        assert data["hotel"]["name"] == hotel["name"]
        assert "password" not in data["user"]

    def test_get_non_numeric_id(self, client):
        resp = client.get(f"{API}/get/abc")
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Invalid ID format"

    def test_get_missing_id(self, client):
        resp = client.get(f"{API}/get/999")
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Review not found"

    def test_get_id_beyond_integer_range(self, client):
        resp = client.get(f"{API}/get/99999999999999999999999")
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Review not found"


class TestUpdateDeleteReview:

    def test_round_trip_partial_update(self, client, user, hotel):
        review = client.post(f"{API}/create", json=_payload(user, hotel)).get_json()["data"]
        client.patch(f"{API}/update/{review['id']}", json={"comment": "Changed my mind"})
        data = client.get(f"{API}/get/{review['id']}").get_json()["data"]
        assert data["comment"] == "Changed my mind"
        assert data["rating"] == review["rating"]
        assert data["review_date"] == review["review_date"]

    def test_parent_keys_cannot_be_updated(self, client, user, hotel):
        review = client.post(f"{API}/create", json=_payload(user, hotel)).get_json()["data"]
        resp = client.patch(f"{API}/update/{review['id']}", json={"hotel_id": hotel["id"]})
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Unexpected fields provided: hotel_id"

    def test_update_rating_range(self, client, user, hotel):
        review = client.post(f"{API}/create", json=_payload(user, hotel)).get_json()["data"]
        resp = client.patch(f"{API}/update/{review['id']}", json={"rating": -1})
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Rating must be between 0 and 5"

    def test_delete_twice(self, client, user, hotel):
        review = client.post(f"{API}/create", json=_payload(user, hotel)).get_json()["data"]
        assert client.delete(f"{API}/delete/{review['id']}").status_code == 200
        assert client.delete(f"{API}/delete/{review['id']}").status_code == 404
