"""Pet service - Business logic for pet operations"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Pet
from ...shared.exceptions import ConflictException, NotFoundException, ValidationException
from ..owners.repository import OwnerRepository
from .repository import PetRepository
from .schemas import PetCreate, PetUpdate

logger = logging.getLogger(__name__)


def _pet_fields(data: PetCreate) -> dict:
    return {
        "owner_id": data.ownerId,
        "name": data.name,
        "species": data.species,
        "breed": data.breed,
        "age": data.age,
        "color": data.color,
        "notes": data.notes,
        "photo_path": data.photoPath,
    }


class PetService:
    """Service layer for pet business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = PetRepository()
        self.owners = OwnerRepository()

    def get_pets(self) -> list[Pet]:
        return self.repo.get_pets(self.db)

    def get_pet(self, pet_id: int) -> Pet:
        pet = self.repo.get_pet_by_id(self.db, pet_id)
        if not pet:
            raise NotFoundException(f"Pet with ID {pet_id} not found.")
        return pet

    def get_pets_by_owner(self, owner_id: int) -> list[Pet]:
        pets = self.repo.get_pets(self.db, owner_id=owner_id)
        if not pets:
            raise NotFoundException(f"No pets found for owner ID {owner_id}.")
        return pets

    def get_pets_by_species(self, species: str) -> list[Pet]:
        pets = self.repo.get_pets(self.db, species=species)
        if not pets:
            raise NotFoundException(f"No pets found of species '{species}'.")
        return pets

    def _require_owner(self, owner_id: int) -> None:
        if not self.owners.owner_exists(self.db, owner_id):
            raise ValidationException("Invalid OwnerId: Owner does not exist.")

    def create_pet(self, data: PetCreate) -> Pet:
        self._require_owner(data.ownerId)
        pet = self.repo.create_pet(self.db, **_pet_fields(data))
        logger.info(f"✅ Registered pet {pet.id} ({pet.name}) for owner {pet.owner_id}")
        return self.get_pet(pet.id)

    def update_pet(self, pet_id: int, data: PetUpdate) -> Pet:
        if pet_id != data.id:
            raise ValidationException("Pet ID mismatch.")

        pet = self.get_pet(pet_id)
        self._require_owner(data.ownerId)

        # Bookings pin a pet to the owner they were made for
        if data.ownerId != pet.owner_id:
            booking_count = self.repo.count_bookings(self.db, pet_id)
            if booking_count:
                raise ConflictException(
                    f"Pet with ID {pet_id} has {booking_count} booking(s) and cannot change owner."
                )

        self.repo.replace_pet(self.db, pet, **_pet_fields(data))
        logger.info(f"✅ Updated pet {pet_id}")
        return self.get_pet(pet_id)

    def delete_pet(self, pet_id: int) -> None:
        """Delete a pet that no booking references"""
        pet = self.get_pet(pet_id)

        booking_count = self.repo.count_bookings(self.db, pet_id)
        if booking_count:
            raise ConflictException(
                f"Pet with ID {pet_id} is referenced by {booking_count} booking(s) and cannot be deleted."
            )

        try:
            self.repo.delete_pet(self.db, pet)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictException(
                f"Pet with ID {pet_id} is referenced by bookings and cannot be deleted."
            ) from e

        logger.info(f"🗑️ Deleted pet {pet_id}")
