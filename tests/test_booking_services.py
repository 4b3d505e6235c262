from conftest import make_booking


def test_attach_and_detach_service(admin_client, db, owner, pet, photographer, portrait, birthday):
    booking = make_booking(db, owner, pet, photographer, [portrait])

    response = admin_client.post(
        "/api/Booking_Service", json={"bookingId": booking.id, "serviceId": birthday.id}
    )
    assert response.status_code == 201
    assert response.json() == {
        "bookingId": booking.id,
        "serviceId": birthday.id,
        "serviceName": "Pet Birthday Shoot",
        "price": "75.00",
        "status": "Pending",
    }
    assert response.headers["Location"] == f"/api/Booking_Service/{booking.id}/{birthday.id}"
    assert len(admin_client.get("/api/Booking_Service").json()) == 2

    assert admin_client.delete(f"/api/Booking_Service/{booking.id}/{birthday.id}").status_code == 204
    assert admin_client.get(f"/api/Booking_Service/{booking.id}/{birthday.id}").status_code == 404


def test_attach_twice_is_conflict(admin_client, db, owner, pet, photographer, portrait):
    booking = make_booking(db, owner, pet, photographer, [portrait])

    response = admin_client.post(
        "/api/Booking_Service", json={"bookingId": booking.id, "serviceId": portrait.id}
    )

    assert response.status_code == 409


def test_attach_to_missing_booking_or_service(admin_client, db, owner, pet, photographer, portrait):
    booking = make_booking(db, owner, pet, photographer)

    missing_booking = admin_client.post("/api/Booking_Service", json={"bookingId": 999, "serviceId": portrait.id})
    missing_service = admin_client.post("/api/Booking_Service", json={"bookingId": booking.id, "serviceId": 999})

    assert missing_booking.status_code == 404
    assert missing_service.status_code == 404


def test_detach_missing_link(admin_client):
    assert admin_client.delete("/api/Booking_Service/1/1").status_code == 404
