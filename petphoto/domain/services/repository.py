"""Service repository - Database operations for the service catalogue"""

from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from ...models import BOOKING_STATUS_CANCELLED, Booking, BookingService, Service


class ServiceRepository:
    """Repository for service database operations"""

    @staticmethod
    def get_active_services(db: Session) -> list[Service]:
        return (
            db.query(Service)
            .filter(Service.is_active.is_(True))
            .order_by(Service.name, Service.id)
            .all()
        )

    @staticmethod
    def get_services_in_price_range(
        db: Session, min_price: Decimal, max_price: Optional[Decimal] = None
    ) -> list[Service]:
        query = db.query(Service).filter(Service.is_active.is_(True), Service.price >= min_price)
        if max_price is not None:
            query = query.filter(Service.price <= max_price)
        return query.order_by(Service.price, Service.name).all()

    @staticmethod
    def get_service_by_id(db: Session, service_id: int) -> Optional[Service]:
        return db.query(Service).filter(Service.id == service_id).first()

    @staticmethod
    def service_exists(db: Session, service_id: int) -> bool:
        return db.query(Service.id).filter(Service.id == service_id).first() is not None

    @staticmethod
    def get_existing_ids(db: Session, service_ids: Iterable[int]) -> set[int]:
        """Return the subset of the given ids that exist"""
        ids = set(service_ids)
        if not ids:
            return set()
        rows = db.query(Service.id).filter(Service.id.in_(ids)).all()
        return {row[0] for row in rows}

    @staticmethod
    def has_active_bookings(db: Session, service_id: int) -> bool:
        """True when any booking that is not cancelled still uses the service"""
        return (
            db.query(BookingService.booking_id)
            .join(Booking, Booking.id == BookingService.booking_id)
            .filter(
                BookingService.service_id == service_id,
                Booking.status != BOOKING_STATUS_CANCELLED,
            )
            .first()
            is not None
        )

    @staticmethod
    def create_service(db: Session, **service_data) -> Service:
        service = Service(**service_data)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def replace_service(db: Session, service: Service, **fields) -> Service:
        for key, value in fields.items():
            setattr(service, key, value)
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def deactivate_service(db: Session, service: Service) -> Service:
        service.is_active = False
        db.commit()
        db.refresh(service)
        return service

    @staticmethod
    def delete_service(db: Session, service: Service) -> None:
        db.delete(service)
        db.commit()
