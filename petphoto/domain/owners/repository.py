"""Owner repository - Database operations for owners"""

from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from ...models import Booking, Owner, Pet


class OwnerRepository:
    """Repository for owner database operations"""

    @staticmethod
    def get_owners(db: Session) -> list[tuple[Owner, int]]:
        """Get all owners alongside how many pets each has"""
        pet_counts = (
            db.query(Pet.owner_id, func.count(Pet.id).label("pet_count"))
            .group_by(Pet.owner_id)
            .subquery()
        )
        rows = (
            db.query(Owner, func.coalesce(pet_counts.c.pet_count, 0))
            .outerjoin(pet_counts, pet_counts.c.owner_id == Owner.id)
            .order_by(Owner.name)
            .all()
        )
        return [(owner, count) for owner, count in rows]

    @staticmethod
    def get_owner_by_id(db: Session, owner_id: int, with_pets: bool = False) -> Optional[Owner]:
        query = db.query(Owner).filter(Owner.id == owner_id)
        if with_pets:
            query = query.options(selectinload(Owner.pets))
        return query.first()

    @staticmethod
    def get_owner_by_email(db: Session, email: str) -> Optional[Owner]:
        return db.query(Owner).filter(func.lower(Owner.email) == email.lower()).first()

    @staticmethod
    def owner_exists(db: Session, owner_id: int) -> bool:
        return db.query(Owner.id).filter(Owner.id == owner_id).first() is not None

    @staticmethod
    def create_owner(db: Session, **owner_data) -> Owner:
        owner = Owner(**owner_data)
        db.add(owner)
        db.commit()
        db.refresh(owner)
        return owner

    @staticmethod
    def replace_owner(db: Session, owner: Owner, **fields) -> Owner:
        """Overwrite every editable field (PUT semantics, None clears a field)"""
        for key, value in fields.items():
            setattr(owner, key, value)
        db.commit()
        db.refresh(owner)
        return owner

    @staticmethod
    def delete_owner(db: Session, owner: Owner) -> None:
        """
        Delete an owner with its bookings, pets and notifications.

        Bookings go first: they restrict pet deletion, so every booking made
        by the owner or for one of the owner's pets must be gone before the
        pets cascade away with the owner.
        """
        owned_pets = db.query(Pet.id).filter(Pet.owner_id == owner.id)
        bookings = db.query(Booking).filter(
            or_(Booking.owner_id == owner.id, Booking.pet_id.in_(owned_pets))
        )
        for booking in bookings.all():
            db.delete(booking)
        db.flush()

        db.delete(owner)
        db.commit()
