from datetime import datetime

import pytest
from sqlalchemy import text

from conftest import make_booking, make_owner, make_pet, make_photographer, make_service
from petphoto.domain.bookings.repository import BookingRepository
from petphoto.models import Booking, BookingService


def booking_payload(owner, pet, photographer, service_ids, **overrides):
    payload = {
        "ownerId": owner.id,
        "petId": pet.id,
        "photographerId": photographer.id,
        "bookingDate": "2026-11-01T10:00:00",
        "location": "High Park",
        "notes": "Bring treats",
        "serviceIds": service_ids,
    }
    payload.update(overrides)
    return payload


def services_for(client, booking_id):
    return client.get(f"/api/Bookings/ServicesForBooking/{booking_id}")


class TestBookingLifecycle:
    def test_create_update_delete_round(self, admin_client, owner, pet, photographer, portrait, birthday):
        response = admin_client.post(
            "/api/Bookings/Add",
            json=booking_payload(owner, pet, photographer, [portrait.id, birthday.id]),
        )
        assert response.status_code == 201
        booking_id = response.json()["id"]
        assert response.headers["Location"] == f"/api/Bookings/Find/{booking_id}"

        listed = services_for(admin_client, booking_id).json()
        assert {(s["serviceId"], s["price"]) for s in listed} == {(portrait.id, "50.00"), (birthday.id, "75.00")}

        response = admin_client.put(
            f"/api/Bookings/Update/{booking_id}",
            json=booking_payload(owner, pet, photographer, [birthday.id], id=booking_id),
        )
        assert response.status_code == 204

        listed = services_for(admin_client, booking_id).json()
        assert [(s["serviceId"], s["price"]) for s in listed] == [(birthday.id, "75.00")]

        assert admin_client.delete(f"/api/Bookings/Delete/{booking_id}").status_code == 204
        assert admin_client.get(f"/api/Bookings/Find/{booking_id}").status_code == 404
        assert services_for(admin_client, booking_id).status_code == 404

    def test_create_returns_detail_with_pending_services(
        self, user_client, owner, pet, photographer, portrait
    ):
        response = user_client.post(
            "/api/Bookings/Add", json=booking_payload(owner, pet, photographer, [portrait.id])
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "Pending"
        assert body["ownerName"] == owner.name
        assert body["petName"] == pet.name
        assert body["photographerName"] == photographer.name
        assert body["services"] == [
            {"serviceId": portrait.id, "name": "Pet Portrait", "price": "50.00", "status": "Pending"}
        ]
        assert body["totalPrice"] == "50.00"

    def test_duplicate_service_ids_are_collapsed(self, admin_client, owner, pet, photographer, portrait):
        response = admin_client.post(
            "/api/Bookings/Add",
            json=booking_payload(owner, pet, photographer, [portrait.id, portrait.id]),
        )

        assert response.status_code == 201
        assert len(response.json()["services"]) == 1

    @pytest.mark.parametrize("missing", ["ownerId", "petId", "photographerId"])
    def test_create_with_missing_reference_persists_nothing(
        self, admin_client, db, owner, pet, photographer, portrait, missing
    ):
        payload = booking_payload(owner, pet, photographer, [portrait.id], **{missing: 9999})

        response = admin_client.post("/api/Bookings/Add", json=payload)

        assert response.status_code == 404
        assert "9999" in response.json()["detail"]
        assert db.query(Booking).count() == 0
        assert db.query(BookingService).count() == 0

    def test_create_with_unknown_service_persists_nothing(
        self, admin_client, db, owner, pet, photographer, portrait
    ):
        response = admin_client.post(
            "/api/Bookings/Add", json=booking_payload(owner, pet, photographer, [portrait.id, 4242])
        )

        assert response.status_code == 404
        assert "4242" in response.json()["detail"]
        assert db.query(Booking).count() == 0

    def test_create_rejects_pet_of_another_owner(self, admin_client, db, owner, photographer):
        other = make_owner(db, name="Mike Chen", email="mike.chen@email.com")
        buddy = make_pet(db, other, name="Buddy")

        response = admin_client.post(
            "/api/Bookings/Add", json=booking_payload(owner, buddy, photographer, [])
        )

        assert response.status_code == 400
        assert db.query(Booking).count() == 0

    def test_create_rejects_unavailable_photographer(self, admin_client, db, owner, pet):
        busy = make_photographer(db, name="Jordan Lee", is_available=False)

        response = admin_client.post("/api/Bookings/Add", json=booking_payload(owner, pet, busy, []))

        assert response.status_code == 400
        assert "not available" in response.json()["detail"]

    def test_create_without_services(self, admin_client, owner, pet, photographer):
        response = admin_client.post("/api/Bookings/Add", json=booking_payload(owner, pet, photographer, []))

        assert response.status_code == 201
        assert services_for(admin_client, response.json()["id"]).json() == []


class TestBookingUpdate:
    def test_update_replaces_scalars(self, admin_client, db, owner, pet, photographer, portrait):
        booking = make_booking(db, owner, pet, photographer, [portrait])

        response = admin_client.put(
            f"/api/Bookings/Update/{booking.id}",
            json=booking_payload(
                owner, pet, photographer, [portrait.id],
                id=booking.id, location=None, notes="Changed", bookingDate="2026-12-24T09:30:00",
            ),
        )
        assert response.status_code == 204

        detail = admin_client.get(f"/api/Bookings/Find/{booking.id}").json()
        assert detail["location"] == ""
        assert detail["notes"] == "Changed"
        assert detail["bookingDate"] == "2026-12-24T09:30:00"
        assert detail["version"] > 1

    def test_update_resets_per_service_status(self, admin_client, db, owner, pet, photographer, portrait):
        booking = make_booking(db, owner, pet, photographer, [portrait])
        link = db.query(BookingService).filter_by(booking_id=booking.id).one()
        link.status = "Confirmed"
        db.commit()

        admin_client.put(
            f"/api/Bookings/Update/{booking.id}",
            json=booking_payload(owner, pet, photographer, [portrait.id], id=booking.id),
        )

        assert [s["status"] for s in services_for(admin_client, booking.id).json()] == ["Pending"]

    def test_update_id_mismatch(self, admin_client, db, owner, pet, photographer):
        booking = make_booking(db, owner, pet, photographer)

        response = admin_client.put(
            f"/api/Bookings/Update/{booking.id}",
            json=booking_payload(owner, pet, photographer, [], id=booking.id + 1),
        )

        assert response.status_code == 400

    def test_update_missing_booking(self, admin_client, owner, pet, photographer):
        response = admin_client.put(
            "/api/Bookings/Update/77", json=booking_payload(owner, pet, photographer, [], id=77)
        )

        assert response.status_code == 404

    def test_update_with_missing_pet(self, admin_client, db, owner, pet, photographer):
        booking = make_booking(db, owner, pet, photographer)

        response = admin_client.put(
            f"/api/Bookings/Update/{booking.id}",
            json=booking_payload(owner, pet, photographer, [], id=booking.id, petId=555),
        )

        assert response.status_code == 404

    def test_update_keeps_photographer_who_became_unavailable(
        self, admin_client, db, owner, pet, photographer
    ):
        booking = make_booking(db, owner, pet, photographer)
        photographer.is_available = False
        db.commit()

        response = admin_client.put(
            f"/api/Bookings/Update/{booking.id}",
            json=booking_payload(owner, pet, photographer, [], id=booking.id, notes="Still on"),
        )

        assert response.status_code == 204

    def test_update_cannot_switch_to_unavailable_photographer(
        self, admin_client, db, owner, pet, photographer
    ):
        booking = make_booking(db, owner, pet, photographer)
        busy = make_photographer(db, name="Jordan Lee", is_available=False)

        response = admin_client.put(
            f"/api/Bookings/Update/{booking.id}",
            json=booking_payload(owner, pet, busy, [], id=booking.id),
        )

        assert response.status_code == 400

    def test_update_with_stale_version_conflicts(self, admin_client, db, owner, pet, photographer):
        booking = make_booking(db, owner, pet, photographer)
        payload = booking_payload(owner, pet, photographer, [], id=booking.id, version=1)

        assert admin_client.put(f"/api/Bookings/Update/{booking.id}", json=payload).status_code == 204
        # Same version again: someone (us) already moved the row to version 2
        response = admin_client.put(f"/api/Bookings/Update/{booking.id}", json=payload)

        assert response.status_code == 409

    def test_concurrent_modification_is_conflict(
        self, admin_client, db, owner, pet, photographer, portrait, monkeypatch
    ):
        booking = make_booking(db, owner, pet, photographer, [portrait])
        booking_id = booking.id
        replace_booking = BookingRepository.replace_booking

        def bumped_meanwhile(session, booking, service_ids, **fields):
            db.execute(text("UPDATE bookings SET version = version + 1 WHERE id = :id"), {"id": booking_id})
            db.commit()
            return replace_booking(session, booking, service_ids, **fields)

        monkeypatch.setattr(BookingRepository, "replace_booking", staticmethod(bumped_meanwhile))

        response = admin_client.put(
            f"/api/Bookings/Update/{booking_id}",
            json=booking_payload(owner, pet, photographer, [], id=booking_id, location="Trinity Bellwoods"),
        )

        assert response.status_code == 409
        db.expire_all()
        stored = db.get(Booking, booking_id)
        assert stored.version == 2
        assert stored.location != "Trinity Bellwoods"
        assert db.query(BookingService).filter_by(booking_id=booking_id).count() == 1

    def test_concurrent_delete_is_not_found(
        self, admin_client, db, owner, pet, photographer, monkeypatch
    ):
        booking = make_booking(db, owner, pet, photographer)
        booking_id = booking.id
        replace_booking = BookingRepository.replace_booking

        def deleted_meanwhile(session, booking, service_ids, **fields):
            db.execute(text("DELETE FROM bookings WHERE id = :id"), {"id": booking_id})
            db.commit()
            return replace_booking(session, booking, service_ids, **fields)

        monkeypatch.setattr(BookingRepository, "replace_booking", staticmethod(deleted_meanwhile))

        response = admin_client.put(
            f"/api/Bookings/Update/{booking_id}",
            json=booking_payload(owner, pet, photographer, [], id=booking_id),
        )

        assert response.status_code == 404
        db.expire_all()
        assert db.get(Booking, booking_id) is None

    def test_update_status(self, admin_client, db, owner, pet, photographer, portrait):
        booking = make_booking(db, owner, pet, photographer, [portrait])

        response = admin_client.put(
            f"/api/Bookings/UpdateStatus/{booking.id}", json={"status": "Cancelled"}
        )

        assert response.status_code == 204
        detail = admin_client.get(f"/api/Bookings/Find/{booking.id}").json()
        assert detail["status"] == "Cancelled"
        assert len(detail["services"]) == 1


class TestBookingDelete:
    def test_delete_keeps_pet_and_services(self, admin_client, db, owner, pet, photographer, portrait):
        booking = make_booking(db, owner, pet, photographer, [portrait])

        assert admin_client.delete(f"/api/Bookings/Delete/{booking.id}").status_code == 204

        db.expire_all()
        assert db.query(BookingService).count() == 0
        assert admin_client.get(f"/api/Pets/{pet.id}").status_code == 200
        assert admin_client.get(f"/api/Services/Find/{portrait.id}").status_code == 200

    def test_delete_missing(self, admin_client):
        assert admin_client.delete("/api/Bookings/Delete/123").status_code == 404


class TestBookingQueries:
    def test_list_is_most_recent_first(self, user_client, db, owner, pet, photographer, portrait, birthday):
        older = make_booking(db, owner, pet, photographer, [portrait], booking_date=datetime(2026, 1, 5, 9))
        newer = make_booking(
            db, owner, pet, photographer, [portrait, birthday],
            booking_date=datetime(2026, 6, 5, 9), location="Studio A",
        )

        rows = user_client.get("/api/Bookings/List").json()

        assert [r["id"] for r in rows] == [newer.id, older.id]
        assert rows[0] == {
            "id": newer.id,
            "bookingDate": "2026-06-05T09:00:00",
            "location": "Studio A",
            "ownerName": owner.name,
            "petName": pet.name,
            "photographerName": photographer.name,
            "serviceCount": 2,
        }
        assert rows[1]["location"] == ""

    def test_find_totals_prices_exactly(self, user_client, db, owner, pet, photographer):
        cheap = make_service(db, name="Paw Print Add-on", price="0.10")
        extra = make_service(db, name="Second Print", price="0.20")
        booking = make_booking(db, owner, pet, photographer, [cheap, extra])

        body = user_client.get(f"/api/Bookings/Find/{booking.id}").json()

        assert [s["price"] for s in body["services"]] == ["0.10", "0.20"]
        assert body["totalPrice"] == "0.30"

    def test_find_without_services_totals_zero(self, user_client, db, owner, pet, photographer):
        booking = make_booking(db, owner, pet, photographer)

        assert user_client.get(f"/api/Bookings/Find/{booking.id}").json()["totalPrice"] == "0.00"

    def test_find_missing(self, user_client):
        response = user_client.get("/api/Bookings/Find/42")

        assert response.status_code == 404
        assert response.json() == {"detail": "Booking with ID 42 not found."}

    def test_bookings_for_owner(self, user_client, db, owner, pet, photographer):
        booking = make_booking(db, owner, pet, photographer)
        lonely = make_owner(db, name="David Kim", email="david.kim@email.com")

        assert [r["id"] for r in user_client.get(f"/api/Bookings/BookingsForOwner/{owner.id}").json()] == [
            booking.id
        ]

        response = user_client.get(f"/api/Bookings/BookingsForOwner/{lonely.id}")
        assert response.status_code == 404
        assert response.json()["detail"].startswith("No bookings found")

        response = user_client.get("/api/Bookings/BookingsForOwner/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Owner with ID 999 not found."

    def test_bookings_for_photographer(self, user_client, db, owner, pet, photographer):
        booking = make_booking(db, owner, pet, photographer)
        idle = make_photographer(db, name="Priya Patel")

        rows = user_client.get(f"/api/Bookings/BookingsForPhotographer/{photographer.id}").json()
        assert [r["id"] for r in rows] == [booking.id]
        assert user_client.get(f"/api/Bookings/BookingsForPhotographer/{idle.id}").status_code == 404
        assert user_client.get("/api/Bookings/BookingsForPhotographer/999").status_code == 404

    def test_bookings_for_service(self, user_client, db, owner, pet, photographer, portrait, birthday):
        booking = make_booking(db, owner, pet, photographer, [portrait])

        rows = user_client.get(f"/api/Bookings/BookingsForService/{portrait.id}").json()
        assert [r["id"] for r in rows] == [booking.id]

        response = user_client.get(f"/api/Bookings/BookingsForService/{birthday.id}")
        assert response.status_code == 404
        assert response.json()["detail"] == f"No bookings found for service ID {birthday.id}."

        response = user_client.get("/api/Bookings/BookingsForService/999")
        assert response.json()["detail"] == "Service with ID 999 not found."

    def test_services_for_booking_includes_description(self, user_client, db, owner, pet, photographer):
        outdoor = make_service(db, name="Outdoor Adventure", price="250.00", description="Park session")
        booking = make_booking(db, owner, pet, photographer, [outdoor])

        assert services_for(user_client, booking.id).json() == [
            {
                "serviceId": outdoor.id,
                "name": "Outdoor Adventure",
                "price": "250.00",
                "description": "Park session",
                "status": "Pending",
            }
        ]
