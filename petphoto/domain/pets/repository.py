"""Pet repository - Database operations for pets"""

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from ...models import Booking, Pet


class PetRepository:
    """Repository for pet database operations"""

    @staticmethod
    def get_pets(
        db: Session, owner_id: Optional[int] = None, species: Optional[str] = None
    ) -> list[Pet]:
        """Get pets with their owners, optionally filtered"""
        query = db.query(Pet).options(joinedload(Pet.owner))

        if owner_id is not None:
            query = query.filter(Pet.owner_id == owner_id)

        if species:
            query = query.filter(func.lower(Pet.species) == species.lower())

        return query.order_by(Pet.name, Pet.id).all()

    @staticmethod
    def get_pet_by_id(db: Session, pet_id: int) -> Optional[Pet]:
        return db.query(Pet).options(joinedload(Pet.owner)).filter(Pet.id == pet_id).first()

    @staticmethod
    def count_bookings(db: Session, pet_id: int) -> int:
        return db.query(func.count(Booking.id)).filter(Booking.pet_id == pet_id).scalar()

    @staticmethod
    def create_pet(db: Session, **pet_data) -> Pet:
        pet = Pet(**pet_data)
        db.add(pet)
        db.commit()
        db.refresh(pet)
        return pet

    @staticmethod
    def replace_pet(db: Session, pet: Pet, **fields) -> Pet:
        for key, value in fields.items():
            setattr(pet, key, value)
        db.commit()
        db.refresh(pet)
        return pet

    @staticmethod
    def delete_pet(db: Session, pet: Pet) -> None:
        db.delete(pet)
        db.commit()
