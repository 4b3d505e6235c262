"""Business logic for attaching single services to bookings"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import BookingService
from ...shared.exceptions import ConflictException, NotFoundException
from ..bookings.repository import BookingRepository
from ..services.repository import ServiceRepository
from .repository import BookingServiceLinkRepository
from .schemas import BookingServiceLinkCreate

logger = logging.getLogger(__name__)


class BookingServiceLinkService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingServiceLinkRepository()
        self.bookings = BookingRepository()
        self.services = ServiceRepository()

    def get_links(self) -> list[BookingService]:
        return self.repo.get_links(self.db)

    def get_link(self, booking_id: int, service_id: int) -> BookingService:
        link = self.repo.get_link(self.db, booking_id, service_id)
        if not link:
            raise NotFoundException(
                f"Service with ID {service_id} is not attached to booking with ID {booking_id}."
            )
        return link

    def create_link(self, data: BookingServiceLinkCreate) -> BookingService:
        if not self.bookings.booking_exists(self.db, data.bookingId):
            raise NotFoundException(f"Booking with ID {data.bookingId} not found.")
        if not self.services.service_exists(self.db, data.serviceId):
            raise NotFoundException(f"Service with ID {data.serviceId} not found.")
        if self.repo.get_link(self.db, data.bookingId, data.serviceId):
            raise ConflictException(
                f"Service with ID {data.serviceId} is already attached to booking with ID {data.bookingId}."
            )

        try:
            self.repo.create_link(self.db, data.bookingId, data.serviceId, data.status)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictException(
                f"Service with ID {data.serviceId} is already attached to booking with ID {data.bookingId}."
            ) from e

        logger.info(f"🔗 Attached service {data.serviceId} to booking {data.bookingId}")
        return self.get_link(data.bookingId, data.serviceId)

    def delete_link(self, booking_id: int, service_id: int) -> None:
        link = self.get_link(booking_id, service_id)
        self.repo.delete_link(self.db, link)
        logger.info(f"🗑️ Detached service {service_id} from booking {booking_id}")
