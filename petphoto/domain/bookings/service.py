"""Booking service - Lifecycle and read paths for bookings"""

import logging
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from ...models import Booking, BookingService, Pet, Photographer
from ...shared.exceptions import ConflictException, NotFoundException, ValidationException
from ..owners.repository import OwnerRepository
from ..pets.repository import PetRepository
from ..photographers.repository import PhotographerRepository
from ..services.repository import ServiceRepository
from .repository import BookingRepository
from .schemas import BookingCreate, BookingStatusUpdate, BookingUpdate

logger = logging.getLogger(__name__)


class BookingLifecycleService:
    """
    Creates, replaces and deletes a booking together with its services.

    Every write is one commit. The bookings table carries a row version, so a
    write that races another one is rolled back and reported as 404 (booking
    deleted meanwhile) or 409 (booking changed meanwhile). Nothing is retried.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()
        self.owners = OwnerRepository()
        self.pets = PetRepository()
        self.photographers = PhotographerRepository()
        self.services = ServiceRepository()

    # Reads

    def list_all(self) -> list[Booking]:
        return self.repo.get_bookings(self.db)

    def find_by_id(self, booking_id: int) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id)
        if not booking:
            raise NotFoundException(f"Booking with ID {booking_id} not found.")
        return booking

    def list_by_owner(self, owner_id: int) -> list[Booking]:
        if not self.owners.owner_exists(self.db, owner_id):
            raise NotFoundException(f"Owner with ID {owner_id} not found.")

        bookings = self.repo.get_bookings(self.db, owner_id=owner_id)
        if not bookings:
            raise NotFoundException(f"No bookings found for owner ID {owner_id}.")
        return bookings

    def list_by_photographer(self, photographer_id: int) -> list[Booking]:
        if not self.photographers.get_photographer_by_id(self.db, photographer_id):
            raise NotFoundException(f"Photographer with ID {photographer_id} not found.")

        bookings = self.repo.get_bookings(self.db, photographer_id=photographer_id)
        if not bookings:
            raise NotFoundException(f"No bookings found for photographer ID {photographer_id}.")
        return bookings

    def list_by_service(self, service_id: int) -> list[Booking]:
        if not self.services.service_exists(self.db, service_id):
            raise NotFoundException(f"Service with ID {service_id} not found.")

        bookings = self.repo.get_bookings(self.db, service_id=service_id)
        if not bookings:
            raise NotFoundException(f"No bookings found for service ID {service_id}.")
        return bookings

    def list_services_for_booking(self, booking_id: int) -> list[BookingService]:
        """Service links of a booking; empty for a booking without services"""
        if not self.repo.booking_exists(self.db, booking_id):
            raise NotFoundException(f"Booking with ID {booking_id} not found.")
        return self.repo.get_service_links(self.db, booking_id)

    # Writes

    def _check_references(
        self, data: BookingCreate, current_photographer_id: Optional[int] = None
    ) -> None:
        """Make sure owner, pet, photographer and services line up before writing"""
        if not self.owners.owner_exists(self.db, data.ownerId):
            raise NotFoundException(f"Owner with ID {data.ownerId} not found.")

        pet: Optional[Pet] = self.pets.get_pet_by_id(self.db, data.petId)
        if not pet:
            raise NotFoundException(f"Pet with ID {data.petId} not found.")

        photographer: Optional[Photographer] = self.photographers.get_photographer_by_id(
            self.db, data.photographerId
        )
        if not photographer:
            raise NotFoundException(f"Photographer with ID {data.photographerId} not found.")

        if pet.owner_id != data.ownerId:
            raise ValidationException(
                f"Pet with ID {pet.id} does not belong to owner with ID {data.ownerId}."
            )

        # An existing assignment survives the photographer going unavailable
        if not photographer.is_available and photographer.id != current_photographer_id:
            raise ValidationException(
                f"Photographer with ID {photographer.id} is not available for bookings."
            )

        missing = set(data.serviceIds) - self.services.get_existing_ids(self.db, data.serviceIds)
        if missing:
            ids = ", ".join(str(i) for i in sorted(missing))
            raise NotFoundException(f"Service(s) with ID {ids} not found.")

    def _fields(self, data: BookingCreate) -> dict:
        return {
            "owner_id": data.ownerId,
            "pet_id": data.petId,
            "photographer_id": data.photographerId,
            "booking_date": data.bookingDate,
            "location": data.location,
            "notes": data.notes,
        }

    def _raise_for_stale(self, booking_id: int, error: StaleDataError) -> None:
        self.db.rollback()
        if not self.repo.booking_exists(self.db, booking_id):
            logger.warning(f"⚠️ Booking {booking_id} was deleted by a concurrent request")
            raise NotFoundException(f"Booking with ID {booking_id} not found.") from error

        logger.warning(f"⚠️ Booking {booking_id} was modified by a concurrent request")
        raise ConflictException(
            f"Booking with ID {booking_id} was modified by another request. Reload and try again."
        ) from error

    def _check_version(self, booking: Booking, expected: Optional[int]) -> None:
        if expected is not None and expected != booking.version:
            raise ConflictException(
                f"Booking with ID {booking.id} was modified by another request. Reload and try again."
            )

    def create(self, data: BookingCreate) -> Booking:
        """Create a Pending booking with one Pending line per selected service"""
        self._check_references(data)

        booking = self.repo.create_booking(self.db, data.serviceIds, **self._fields(data))
        logger.info(
            f"📅 Created booking {booking.id} for owner {data.ownerId} "
            f"with {len(data.serviceIds)} service(s)"
        )
        return self.find_by_id(booking.id)

    def update(self, booking_id: int, data: BookingUpdate) -> Booking:
        if booking_id != data.id:
            raise ValidationException("Booking ID mismatch.")

        booking = self.find_by_id(booking_id)
        self._check_version(booking, data.version)
        self._check_references(data, current_photographer_id=booking.photographer_id)

        try:
            self.repo.replace_booking(self.db, booking, data.serviceIds, **self._fields(data))
        except StaleDataError as e:
            self._raise_for_stale(booking_id, e)

        logger.info(f"✅ Updated booking {booking_id}, services now {data.serviceIds}")
        return self.find_by_id(booking_id)

    def update_status(self, booking_id: int, data: BookingStatusUpdate) -> Booking:
        booking = self.find_by_id(booking_id)
        self._check_version(booking, data.version)

        try:
            self.repo.update_status(self.db, booking, data.status)
        except StaleDataError as e:
            self._raise_for_stale(booking_id, e)

        logger.info(f"✅ Booking {booking_id} status set to {data.status}")
        return self.find_by_id(booking_id)

    def delete(self, booking_id: int) -> None:
        booking = self.find_by_id(booking_id)

        try:
            self.repo.delete_booking(self.db, booking)
        except StaleDataError as e:
            self._raise_for_stale(booking_id, e)

        logger.info(f"🗑️ Deleted booking {booking_id} and its service links")
