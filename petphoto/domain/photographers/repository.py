"""Photographer repository - Database operations for photographers"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Booking, Photographer


class PhotographerRepository:
    """Repository for photographer database operations"""

    @staticmethod
    def get_photographers(db: Session, available_only: bool = False) -> list[Photographer]:
        query = db.query(Photographer)
        if available_only:
            query = query.filter(Photographer.is_available.is_(True))
        return query.order_by(Photographer.name, Photographer.id).all()

    @staticmethod
    def get_photographer_by_id(db: Session, photographer_id: int) -> Optional[Photographer]:
        return db.query(Photographer).filter(Photographer.id == photographer_id).first()

    @staticmethod
    def count_bookings(db: Session, photographer_id: int) -> int:
        return (
            db.query(func.count(Booking.id))
            .filter(Booking.photographer_id == photographer_id)
            .scalar()
        )

    @staticmethod
    def create_photographer(db: Session, **data) -> Photographer:
        photographer = Photographer(**data)
        db.add(photographer)
        db.commit()
        db.refresh(photographer)
        return photographer

    @staticmethod
    def replace_photographer(db: Session, photographer: Photographer, **fields) -> Photographer:
        for key, value in fields.items():
            setattr(photographer, key, value)
        db.commit()
        db.refresh(photographer)
        return photographer

    @staticmethod
    def delete_photographer(db: Session, photographer: Photographer) -> None:
        db.delete(photographer)
        db.commit()
