"""Owner domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_email, validate_phone, validate_required_text


class OwnerCreate(BaseModel):
    """Schema for creating a new owner"""

    name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    phone: Optional[str] = Field(default=None, max_length=20)
    address: Optional[str] = Field(default=None, max_length=200)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_required_text(v, "Name")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        v = validate_email(v)
        if not v:
            raise ValueError("Email is required")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v):
        if v:
            return validate_phone(v)
        return v


class OwnerUpdate(OwnerCreate):
    """Full replacement of an owner; id must match the URL"""

    id: int


class OwnerPetSummary(BaseModel):
    id: int
    name: str
    species: str
    breed: Optional[str] = None
    age: int


class OwnerResponse(BaseModel):
    """Schema for owner response"""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    petCount: int = 0
    created_at: Optional[datetime] = None


class OwnerDetailResponse(OwnerResponse):
    pets: list[OwnerPetSummary] = []
