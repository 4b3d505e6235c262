"""Owner service - Business logic for owner operations"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...models import Owner
from ...shared.exceptions import ConflictException, NotFoundException, ValidationException
from .repository import OwnerRepository
from .schemas import OwnerCreate, OwnerUpdate

logger = logging.getLogger(__name__)


class OwnerService:
    """Service layer for owner business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = OwnerRepository()

    def get_owners(self) -> list[tuple[Owner, int]]:
        return self.repo.get_owners(self.db)

    def get_owner(self, owner_id: int, with_pets: bool = False) -> Owner:
        owner = self.repo.get_owner_by_id(self.db, owner_id, with_pets=with_pets)
        if not owner:
            raise NotFoundException(f"Owner with ID {owner_id} not found.")
        return owner

    def create_owner(self, data: OwnerCreate) -> Owner:
        """Create a new owner, rejecting duplicate emails"""
        if self.repo.get_owner_by_email(self.db, data.email):
            raise ConflictException(f"An owner with email {data.email} already exists.")

        try:
            owner = self.repo.create_owner(self.db, **data.model_dump())
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"⚠️ Owner insert rejected by the database: {e.orig}")
            raise ConflictException(f"An owner with email {data.email} already exists.") from e

        logger.info(f"✅ Created owner {owner.id} ({owner.email})")
        return owner

    def update_owner(self, owner_id: int, data: OwnerUpdate) -> Owner:
        if owner_id != data.id:
            raise ValidationException("Owner ID mismatch.")

        owner = self.get_owner(owner_id)

        existing = self.repo.get_owner_by_email(self.db, data.email)
        if existing and existing.id != owner_id:
            raise ConflictException(f"An owner with email {data.email} already exists.")

        fields = data.model_dump(exclude={"id"})
        try:
            owner = self.repo.replace_owner(self.db, owner, **fields)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictException(f"An owner with email {data.email} already exists.") from e

        logger.info(f"✅ Updated owner {owner_id}")
        return owner

    def delete_owner(self, owner_id: int) -> None:
        """Delete an owner; pets, bookings and notifications go with it"""
        owner = self.get_owner(owner_id)
        self.repo.delete_owner(self.db, owner)
        logger.info(f"🗑️ Deleted owner {owner_id} and dependent records")
