"""Booking_Service router - direct access to booking/service links"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from ...models import BookingService
from .schemas import BookingServiceLinkCreate, BookingServiceLinkResponse
from .service import BookingServiceLinkService

router = APIRouter(prefix="/api/Booking_Service", tags=["Booking_Service"])


def get_link_service(db: Session = Depends(get_db)) -> BookingServiceLinkService:
    return BookingServiceLinkService(db)


def _link_response(link: BookingService) -> BookingServiceLinkResponse:
    return BookingServiceLinkResponse(
        bookingId=link.booking_id,
        serviceId=link.service_id,
        serviceName=link.service.name,
        price=link.service.price,
        status=link.status,
    )


@router.get("", response_model=list[BookingServiceLinkResponse])
def list_links(
    _: AuthContext = Depends(require_login),
    service: BookingServiceLinkService = Depends(get_link_service),
):
    return [_link_response(link) for link in service.get_links()]


@router.get("/{booking_id}/{service_id}", response_model=BookingServiceLinkResponse)
def get_link(
    booking_id: int,
    service_id: int,
    _: AuthContext = Depends(require_login),
    service: BookingServiceLinkService = Depends(get_link_service),
):
    return _link_response(service.get_link(booking_id, service_id))


@router.post("", response_model=BookingServiceLinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    data: BookingServiceLinkCreate,
    response: Response,
    _: AuthContext = Depends(require_admin),
    service: BookingServiceLinkService = Depends(get_link_service),
):
    link = service.create_link(data)
    response.headers["Location"] = f"/api/Booking_Service/{link.booking_id}/{link.service_id}"
    return _link_response(link)


@router.delete("/{booking_id}/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_link(
    booking_id: int,
    service_id: int,
    _: AuthContext = Depends(require_admin),
    service: BookingServiceLinkService = Depends(get_link_service),
):
    service.delete_link(booking_id, service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
