"""Booking repository - Database operations for bookings and their services"""

from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload, selectinload

from ...models import BOOKING_STATUS_PENDING, Booking, BookingService


def _with_booking_graph(query: Query) -> Query:
    """Load owner, pet and photographer in the same row, services in one extra query"""
    return query.options(
        joinedload(Booking.owner),
        joinedload(Booking.pet),
        joinedload(Booking.photographer),
        selectinload(Booking.booking_services).joinedload(BookingService.service),
    )


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_bookings(
        db: Session,
        owner_id: Optional[int] = None,
        photographer_id: Optional[int] = None,
        service_id: Optional[int] = None,
    ) -> list[Booking]:
        """Get bookings most recent first, optionally filtered by one related entity"""
        query = _with_booking_graph(db.query(Booking))

        if owner_id is not None:
            query = query.filter(Booking.owner_id == owner_id)

        if photographer_id is not None:
            query = query.filter(Booking.photographer_id == photographer_id)

        if service_id is not None:
            query = query.filter(
                Booking.booking_services.any(BookingService.service_id == service_id)
            )

        return query.order_by(Booking.booking_date.desc(), Booking.id.desc()).all()

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int) -> Optional[Booking]:
        return _with_booking_graph(db.query(Booking)).filter(Booking.id == booking_id).first()

    @staticmethod
    def booking_exists(db: Session, booking_id: int) -> bool:
        return db.query(Booking.id).filter(Booking.id == booking_id).first() is not None

    @staticmethod
    def get_service_links(db: Session, booking_id: int) -> list[BookingService]:
        return (
            db.query(BookingService)
            .options(joinedload(BookingService.service))
            .filter(BookingService.booking_id == booking_id)
            .order_by(BookingService.service_id)
            .all()
        )

    @staticmethod
    def create_booking(db: Session, service_ids: list[int], **booking_data: Any) -> Booking:
        """Insert the booking and one Pending link per service in a single commit"""
        booking = Booking(status=BOOKING_STATUS_PENDING, **booking_data)
        booking.booking_services = [
            BookingService(service_id=service_id, status=BOOKING_STATUS_PENDING)
            for service_id in service_ids
        ]
        db.add(booking)
        db.commit()
        return booking

    @staticmethod
    def replace_booking(
        db: Session, booking: Booking, service_ids: list[int], **fields: Any
    ) -> Booking:
        """
        Overwrite a booking and replace its service set.

        Replace, not merge: every existing link row is deleted and a fresh
        Pending row is inserted for each requested service. The deletes are
        flushed first so re-selected services do not collide on the
        composite key.

        Raises:
            StaleDataError: If the row version moved underneath us
        """
        for key, value in fields.items():
            setattr(booking, key, value)
        # Always issue the versioned UPDATE, even if only the services changed
        booking.updated_at = func.now()

        booking.booking_services.clear()
        db.flush()

        for service_id in service_ids:
            booking.booking_services.append(
                BookingService(service_id=service_id, status=BOOKING_STATUS_PENDING)
            )
        db.commit()
        return booking

    @staticmethod
    def update_status(db: Session, booking: Booking, status: str) -> Booking:
        booking.status = status
        booking.updated_at = func.now()
        db.commit()
        return booking

    @staticmethod
    def delete_booking(db: Session, booking: Booking) -> None:
        """Delete the service links first, then the booking itself"""
        booking.booking_services.clear()
        db.flush()

        db.delete(booking)
        db.commit()
