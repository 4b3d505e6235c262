"""Booking domain schemas - request bodies and the flattened read views"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...models import Booking
from ...shared.validators import validate_required_text


class BookingCreate(BaseModel):
    """Schema for scheduling a session with its selected services"""

    ownerId: int
    petId: int
    photographerId: int
    bookingDate: datetime
    location: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = None
    serviceIds: list[int] = []

    @field_validator("serviceIds")
    @classmethod
    def dedupe_service_ids(cls, v):
        # Keep first occurrence order; the join table allows each service once
        return list(dict.fromkeys(v))


class BookingUpdate(BookingCreate):
    """
    Full replacement of a booking.

    The service list replaces the existing one wholesale, so any per-service
    status is reset to Pending. Sending the version read from the detail view
    makes the update fail with 409 if someone else changed the booking since.
    """

    id: int
    version: Optional[int] = None


class BookingStatusUpdate(BaseModel):
    status: str = Field(max_length=50)
    version: Optional[int] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return validate_required_text(v, "Status")


class BookingSummary(BaseModel):
    """List row: just enough to pick a booking out of a table"""

    id: int
    bookingDate: datetime
    location: str
    ownerName: str
    petName: str
    photographerName: str
    serviceCount: int

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingSummary":
        return cls(
            id=booking.id,
            bookingDate=booking.booking_date,
            location=booking.location or "",
            ownerName=booking.owner.name if booking.owner else "Unknown Owner",
            petName=booking.pet.name if booking.pet else "Unknown Pet",
            photographerName=booking.photographer.name if booking.photographer else "Unknown Photographer",
            serviceCount=len(booking.booking_services),
        )


class BookingServiceItem(BaseModel):
    serviceId: int
    name: str
    price: Decimal
    status: str


class BookingDetail(BaseModel):
    id: int
    bookingDate: datetime
    location: str
    notes: Optional[str] = None
    status: str
    version: int
    ownerId: int
    ownerName: str
    petId: int
    petName: str
    photographerId: int
    photographerName: str
    services: list[BookingServiceItem]
    totalPrice: Decimal

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingDetail":
        services = [
            BookingServiceItem(
                serviceId=link.service_id,
                name=link.service.name,
                price=link.service.price,
                status=link.status,
            )
            for link in booking.booking_services
        ]
        return cls(
            id=booking.id,
            bookingDate=booking.booking_date,
            location=booking.location or "",
            notes=booking.notes,
            status=booking.status,
            version=booking.version,
            ownerId=booking.owner_id,
            ownerName=booking.owner.name if booking.owner else "Unknown Owner",
            petId=booking.pet_id,
            petName=booking.pet.name if booking.pet else "Unknown Pet",
            photographerId=booking.photographer_id,
            photographerName=booking.photographer.name if booking.photographer else "Unknown Photographer",
            services=services,
            totalPrice=sum((item.price for item in services), Decimal("0.00")),
        )


class ServiceForBooking(BaseModel):
    serviceId: int
    name: str
    price: Decimal
    description: Optional[str] = None
    status: str
