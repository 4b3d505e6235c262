"""Schemas for individual booking/service links"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ...models import BOOKING_STATUS_PENDING
from ...shared.validators import validate_required_text


class BookingServiceLinkCreate(BaseModel):
    bookingId: int
    serviceId: int
    status: str = Field(default=BOOKING_STATUS_PENDING, max_length=50)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v):
        return validate_required_text(v, "Status")


class BookingServiceLinkResponse(BaseModel):
    bookingId: int
    serviceId: int
    serviceName: str
    price: Decimal
    status: str
