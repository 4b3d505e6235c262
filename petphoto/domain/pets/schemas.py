"""Pet domain schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_required_text


class PetCreate(BaseModel):
    """Schema for registering a pet against an owner"""

    ownerId: int
    name: str = Field(max_length=100)
    species: str = Field(max_length=50)
    breed: Optional[str] = Field(default=None, max_length=100)
    age: int = Field(default=0, ge=0)
    color: Optional[str] = Field(default=None, max_length=20)
    notes: Optional[str] = Field(default=None, max_length=500)
    photoPath: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_required_text(v, "Name")

    @field_validator("species")
    @classmethod
    def validate_species(cls, v):
        return validate_required_text(v, "Species")


class PetUpdate(PetCreate):
    id: int


class PetResponse(BaseModel):
    """Schema for pet response"""

    id: int
    ownerId: int
    ownerName: str
    name: str
    species: str
    breed: Optional[str] = None
    age: int
    color: Optional[str] = None
    notes: Optional[str] = None
    photoPath: Optional[str] = None
    created_at: Optional[datetime] = None
