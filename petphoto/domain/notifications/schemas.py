"""Notification domain schemas"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...shared.validators import validate_required_text


class NotificationCreate(BaseModel):
    """Schema for sending a notification to an owner"""

    ownerId: int
    title: Optional[str] = Field(default=None, max_length=100)
    message: str = Field(max_length=500)
    type: str = Field(default="Booking", max_length=50)
    isRead: bool = False

    @field_validator("message")
    @classmethod
    def validate_message(cls, v):
        return validate_required_text(v, "Message")


class NotificationUpdate(NotificationCreate):
    id: int


class NotificationResponse(BaseModel):
    id: int
    ownerId: int
    ownerName: str
    title: Optional[str] = None
    message: str
    type: str
    isRead: bool
    created_at: Optional[datetime] = None
