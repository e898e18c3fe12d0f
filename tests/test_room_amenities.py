API = "/api/v1/room_amenity"


class TestRoomAmenities:

    def test_create(self, client, room):
        resp = client.post(f"{API}/create", json={"room_id": room["id"], "amenity_type": "minibar"})
        assert resp.status_code == 201
        assert resp.get_json()["data"]["amenity_type"] == "minibar"

    def test_unknown_room(self, client):
        resp = client.post(f"{API}/create", json={"room_id": 999, "amenity_type": "minibar"})
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Room not found"

    def test_missing_field_is_named(self, client, room):
        resp = client.post(f"{API}/create", json={"room_id": room["id"]})
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "amenity_type is required"

    def test_empty_list_is_not_found(self, client):
        resp = client.get(f"{API}/getAll")
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "No room amenities found"

    def test_get_includes_room(self, client, room):
        amenity = client.post(f"{API}/create", json={"room_id": room["id"], "amenity_type": "wifi"}).get_json()["data"]
        resp = client.get(f"{API}/get/{amenity['id']}")
        assert resp.status_code == 200
        assert resp.get_json()["data"]["room"]["id"] == room["id"]

    def test_update_type(self, client, room):
        amenity = client.post(f"{API}/create", json={"room_id": room["id"], "amenity_type": "wifi"}).get_json()["data"]
        resp = client.patch(f"{API}/update/{amenity['id']}", json={"amenity_type": "balcony"})
        assert resp.status_code == 200
        data = resp.get_json()["data"]
        assert data["amenity_type"] == "balcony"
        assert data["room_id"] == room["id"]

    def test_room_cannot_be_reassigned(self, client, room):
        amenity = client.post(f"{API}/create", json={"room_id": room["id"], "amenity_type": "wifi"}).get_json()["data"]
        resp = client.patch(f"{API}/update/{amenity['id']}", json={"room_id": room["id"]})
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "Unexpected fields provided: room_id"

    def test_delete_twice(self, client, room):
        amenity = client.post(f"{API}/create", json={"room_id": room["id"], "amenity_type": "wifi"}).get_json()["data"]
        assert client.delete(f"{API}/delete/{amenity['id']}").status_code == 200
        resp = client.delete(f"{API}/delete/{amenity['id']}")
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Room amenity not found"
