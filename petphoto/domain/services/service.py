"""Service catalogue - Business logic for priced offerings"""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Service
from ...shared.exceptions import NotFoundException, ValidationException
from .repository import ServiceRepository
from .schemas import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


class CatalogueService:
    """Service layer for the service catalogue"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ServiceRepository()

    def get_services(self) -> list[Service]:
        """Active services only, ordered by name"""
        return self.repo.get_active_services(self.db)

    def get_service(self, service_id: int) -> Service:
        service = self.repo.get_service_by_id(self.db, service_id)
        if not service:
            raise NotFoundException(f"Service with ID {service_id} not found.")
        return service

    def get_services_by_price_range(
        self, min_price: Decimal = Decimal("0"), max_price: Optional[Decimal] = None
    ) -> list[Service]:
        if min_price < 0 or (max_price is not None and max_price < 0):
            raise ValidationException("Price values cannot be negative.")
        if max_price is not None and min_price > max_price:
            raise ValidationException("Minimum price cannot be greater than maximum price.")

        return self.repo.get_services_in_price_range(self.db, min_price, max_price)

    def create_service(self, data: ServiceCreate) -> Service:
        service = self.repo.create_service(
            self.db,
            name=data.name,
            description=data.description,
            price=data.price,
            is_active=True,
        )
        logger.info(f"✅ Added service {service.id} ({service.name}, {service.price})")
        return service

    def update_service(self, service_id: int, data: ServiceUpdate) -> Service:
        if service_id != data.id:
            raise ValidationException("Service ID mismatch.")

        service = self.get_service(service_id)
        service = self.repo.replace_service(
            self.db, service, name=data.name, description=data.description, price=data.price
        )
        logger.info(f"✅ Updated service {service_id}")
        return service

    def delete_service(self, service_id: int) -> bool:
        """
        Remove a service from the catalogue.

        A service still attached to a booking that is not cancelled is only
        deactivated so that booking keeps its line item. Anything else is
        deleted outright, together with its links to cancelled bookings.

        Returns:
            True if the row was deleted, False if it was deactivated
        """
        service = self.get_service(service_id)

        if self.repo.has_active_bookings(self.db, service_id):
            self.repo.deactivate_service(self.db, service)
            logger.info(f"📦 Service {service_id} is in use by active bookings, deactivated instead")
            return False

        self.repo.delete_service(self.db, service)
        logger.info(f"🗑️ Deleted service {service_id}")
        return True
