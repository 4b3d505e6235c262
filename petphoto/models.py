from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base

BOOKING_STATUS_PENDING = "Pending"
BOOKING_STATUS_CANCELLED = "Cancelled"


class Owner(Base):
    __tablename__ = "owners"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(20), nullable=True)
    address = Column(String(200), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Deleting an owner removes everything hanging off it
    pets = relationship(
        "Pet", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )
    bookings = relationship(
        "Booking", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )
    notifications = relationship(
        "Notification", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )


class Pet(Base):
    __tablename__ = "pets"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("owners.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name = Column(String(100), nullable=False)
    species = Column(String(50), nullable=False)  # Dog, Cat, Rabbit...
    breed = Column(String(100), nullable=True)
    age = Column(Integer, default=0, nullable=False)
    color = Column(String(20), nullable=True)
    notes = Column(String(500), nullable=True)  # Behavioural notes for the photographer
    photo_path = Column(String(500), nullable=True)  # Reference to an uploaded photo
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("Owner", back_populates="pets")
    bookings = relationship("Booking", back_populates="pet", passive_deletes="all")


class Photographer(Base):
    __tablename__ = "photographers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    specialty = Column(String(100), nullable=True)  # e.g. "Action shots", "Cats"
    is_available = Column(Boolean, default=True, nullable=False)

    bookings = relationship("Booking", back_populates="photographer", passive_deletes="all")


class Service(Base):
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    # Inactive services are hidden from listings but kept for historical bookings
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    last_modified = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    booking_services = relationship(
        "BookingService", back_populates="service", cascade="all, delete-orphan", passive_deletes=True
    )


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("owners.id", ondelete="CASCADE"), index=True, nullable=False
    )
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="RESTRICT"), index=True, nullable=False)
    photographer_id = Column(
        Integer, ForeignKey("photographers.id", ondelete="RESTRICT"), index=True, nullable=False
    )
    booking_date = Column(DateTime, nullable=False)
    location = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(50), default=BOOKING_STATUS_PENDING, nullable=False)
    version = Column(Integer, nullable=False, default=1)  # Optimistic concurrency row version
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    owner = relationship("Owner", back_populates="bookings")
    pet = relationship("Pet", back_populates="bookings")
    photographer = relationship("Photographer", back_populates="bookings")
    booking_services = relationship(
        "BookingService",
        back_populates="booking",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="BookingService.service_id",
    )

    __mapper_args__ = {"version_id_col": version}


class BookingService(Base):
    """Join row between a booking and one selected service"""

    __tablename__ = "booking_services"

    booking_id = Column(
        Integer, ForeignKey("bookings.id", ondelete="CASCADE"), primary_key=True
    )
    service_id = Column(
        Integer, ForeignKey("services.id", ondelete="CASCADE"), primary_key=True, index=True
    )
    status = Column(String(50), default=BOOKING_STATUS_PENDING, nullable=False)

    booking = relationship("Booking", back_populates="booking_services")
    service = relationship("Service", back_populates="booking_services")


class Notification(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(
        Integer, ForeignKey("owners.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title = Column(String(100), nullable=True)
    message = Column(String(500), nullable=False)
    type = Column(String(50), default="Booking", nullable=False)  # Booking, Reminder, Confirmation, Welcome
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("Owner", back_populates="notifications")
