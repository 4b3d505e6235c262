"""Booking router - FastAPI endpoints for bookings"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from .schemas import (
    BookingCreate,
    BookingDetail,
    BookingStatusUpdate,
    BookingSummary,
    BookingUpdate,
    ServiceForBooking,
)
from .service import BookingLifecycleService

router = APIRouter(prefix="/api/Bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingLifecycleService:
    """Dependency injection for BookingLifecycleService"""
    return BookingLifecycleService(db)


@router.get("/List", response_model=list[BookingSummary])
def list_bookings(
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    """All bookings, most recent first"""
    return [BookingSummary.from_booking(b) for b in service.list_all()]


@router.get("/Find/{booking_id}", response_model=BookingDetail)
def find_booking(
    booking_id: int,
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    return BookingDetail.from_booking(service.find_by_id(booking_id))


@router.post("/Add", response_model=BookingDetail, status_code=status.HTTP_201_CREATED)
def add_booking(
    data: BookingCreate,
    response: Response,
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    """Any logged-in user may book a session"""
    booking = service.create(data)
    response.headers["Location"] = f"/api/Bookings/Find/{booking.id}"
    return BookingDetail.from_booking(booking)


@router.put("/Update/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_booking(
    booking_id: int,
    data: BookingUpdate,
    _: AuthContext = Depends(require_admin),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    service.update(booking_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/UpdateStatus/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_booking_status(
    booking_id: int,
    data: BookingStatusUpdate,
    _: AuthContext = Depends(require_admin),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    """Confirm, complete or cancel a booking without touching its services"""
    service.update_status(booking_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/Delete/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(
    booking_id: int,
    _: AuthContext = Depends(require_admin),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    service.delete(booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/BookingsForOwner/{owner_id}", response_model=list[BookingSummary])
def bookings_for_owner(
    owner_id: int,
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    return [BookingSummary.from_booking(b) for b in service.list_by_owner(owner_id)]


@router.get("/BookingsForPhotographer/{photographer_id}", response_model=list[BookingSummary])
def bookings_for_photographer(
    photographer_id: int,
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    return [BookingSummary.from_booking(b) for b in service.list_by_photographer(photographer_id)]


@router.get("/BookingsForService/{service_id}", response_model=list[BookingSummary])
def bookings_for_service(
    service_id: int,
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    return [BookingSummary.from_booking(b) for b in service.list_by_service(service_id)]


@router.get("/ServicesForBooking/{booking_id}", response_model=list[ServiceForBooking])
def services_for_booking(
    booking_id: int,
    _: AuthContext = Depends(require_login),
    service: BookingLifecycleService = Depends(get_booking_service),
):
    links = service.list_services_for_booking(booking_id)
    return [
        ServiceForBooking(
            serviceId=link.service_id,
            name=link.service.name,
            price=link.service.price,
            description=link.service.description,
            status=link.status,
        )
        for link in links
    ]
