from conftest import make_booking, make_photographer


def test_available_only_filter(user_client, db, photographer):
    make_photographer(db, name="Jordan Lee", is_available=False)

    everyone = [p["name"] for p in user_client.get("/api/Photographers").json()]
    available = [p["name"] for p in user_client.get("/api/Photographers?available_only=true").json()]

    assert everyone == ["Alex Morgan", "Jordan Lee"]
    assert available == ["Alex Morgan"]


def test_create_and_update_photographer(admin_client):
    created = admin_client.post(
        "/api/Photographers",
        json={"name": "Priya Patel", "email": "Priya@PetPhoto.example", "specialty": "Cats"},
    )
    assert created.status_code == 201
    photographer_id = created.json()["id"]
    assert created.json()["email"] == "priya@petphoto.example"
    assert created.json()["isAvailable"] is True

    response = admin_client.put(
        f"/api/Photographers/{photographer_id}",
        json={"id": photographer_id, "name": "Priya Patel", "isAvailable": False},
    )

    assert response.status_code == 204
    body = admin_client.get(f"/api/Photographers/{photographer_id}").json()
    assert body["isAvailable"] is False
    assert body["specialty"] is None


def test_update_photographer_id_mismatch(admin_client, photographer):
    response = admin_client.put(
        f"/api/Photographers/{photographer.id}", json={"id": 0, "name": "Alex Morgan"}
    )

    assert response.status_code == 400


def test_delete_photographer_with_bookings_is_conflict(admin_client, db, owner, pet, photographer):
    make_booking(db, owner, pet, photographer)

    assert admin_client.delete(f"/api/Photographers/{photographer.id}").status_code == 409


def test_delete_photographer(admin_client, photographer):
    assert admin_client.delete(f"/api/Photographers/{photographer.id}").status_code == 204
    assert admin_client.get(f"/api/Photographers/{photographer.id}").status_code == 404
