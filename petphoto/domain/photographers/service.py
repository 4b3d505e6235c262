"""Photographer service - Business logic for photographer operations"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Photographer
from ...shared.exceptions import ConflictException, NotFoundException, ValidationException
from .repository import PhotographerRepository
from .schemas import PhotographerCreate, PhotographerUpdate

logger = logging.getLogger(__name__)


def _photographer_fields(data: PhotographerCreate) -> dict:
    return {
        "name": data.name,
        "email": data.email,
        "phone": data.phone,
        "specialty": data.specialty,
        "is_available": data.isAvailable,
    }


class PhotographerService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = PhotographerRepository()

    def get_photographers(self, available_only: bool = False) -> list[Photographer]:
        return self.repo.get_photographers(self.db, available_only=available_only)

    def get_photographer(self, photographer_id: int) -> Photographer:
        photographer = self.repo.get_photographer_by_id(self.db, photographer_id)
        if not photographer:
            raise NotFoundException(f"Photographer with ID {photographer_id} not found.")
        return photographer

    def create_photographer(self, data: PhotographerCreate) -> Photographer:
        photographer = self.repo.create_photographer(self.db, **_photographer_fields(data))
        logger.info(f"✅ Created photographer {photographer.id} ({photographer.name})")
        return photographer

    def update_photographer(self, photographer_id: int, data: PhotographerUpdate) -> Photographer:
        if photographer_id != data.id:
            raise ValidationException("Photographer ID mismatch.")

        photographer = self.get_photographer(photographer_id)
        photographer = self.repo.replace_photographer(
            self.db, photographer, **_photographer_fields(data)
        )
        logger.info(f"✅ Updated photographer {photographer_id}")
        return photographer

    def delete_photographer(self, photographer_id: int) -> None:
        photographer = self.get_photographer(photographer_id)

        booking_count = self.repo.count_bookings(self.db, photographer_id)
        if booking_count:
            logger.warning(
                f"⚠️ Refusing to delete photographer {photographer_id}: {booking_count} booking(s) reference it"
            )
            raise ConflictException(
                f"Photographer with ID {photographer_id} is assigned to {booking_count} booking(s) and cannot be deleted."
            )

        try:
            self.repo.delete_photographer(self.db, photographer)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictException(
                f"Photographer with ID {photographer_id} is assigned to bookings and cannot be deleted."
            ) from e

        logger.info(f"🗑️ Deleted photographer {photographer_id}")
