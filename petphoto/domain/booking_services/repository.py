"""Repository for the booking_services join table"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import BookingService


class BookingServiceLinkRepository:
    @staticmethod
    def get_links(db: Session) -> list[BookingService]:
        return (
            db.query(BookingService)
            .options(joinedload(BookingService.service))
            .order_by(BookingService.booking_id, BookingService.service_id)
            .all()
        )

    @staticmethod
    def get_link(db: Session, booking_id: int, service_id: int) -> Optional[BookingService]:
        return (
            db.query(BookingService)
            .options(joinedload(BookingService.service))
            .filter(
                BookingService.booking_id == booking_id,
                BookingService.service_id == service_id,
            )
            .first()
        )

    @staticmethod
    def create_link(db: Session, booking_id: int, service_id: int, status: str) -> BookingService:
        link = BookingService(booking_id=booking_id, service_id=service_id, status=status)
        db.add(link)
        db.commit()
        return link

    @staticmethod
    def delete_link(db: Session, link: BookingService) -> None:
        db.delete(link)
        db.commit()
