"""Service catalogue schemas"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_required_text


class ServiceCreate(BaseModel):
    """Schema for adding a priced offering to the catalogue"""

    name: str = Field(max_length=100)
    description: Optional[str] = None
    price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_required_text(v, "Service name")


class ServiceUpdate(ServiceCreate):
    id: int


class ServiceResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    isActive: bool
    created_at: Optional[datetime] = None
    last_modified: Optional[datetime] = None
