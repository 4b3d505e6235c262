"""Service router - FastAPI endpoints for the service catalogue"""

from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from ...models import Service
from ..bookings.schemas import BookingDetail
from ..bookings.service import BookingLifecycleService
from .schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from .service import CatalogueService

router = APIRouter(prefix="/api/Services", tags=["Services"])


def get_catalogue_service(db: Session = Depends(get_db)) -> CatalogueService:
    """Dependency injection for CatalogueService"""
    return CatalogueService(db)


def _service_response(service: Service) -> ServiceResponse:
    return ServiceResponse(
        id=service.id,
        name=service.name,
        description=service.description,
        price=service.price,
        isActive=service.is_active,
        created_at=service.created_at,
        last_modified=service.last_modified,
    )


@router.get("/List", response_model=list[ServiceResponse])
def list_services(
    _: AuthContext = Depends(require_login),
    service: CatalogueService = Depends(get_catalogue_service),
):
    """Active services ordered by name"""
    return [_service_response(s) for s in service.get_services()]


@router.get("/ByPriceRange", response_model=list[ServiceResponse])
def list_services_by_price_range(
    minPrice: Decimal = Query(Decimal("0")),
    maxPrice: Optional[Decimal] = Query(None),
    _: AuthContext = Depends(require_login),
    service: CatalogueService = Depends(get_catalogue_service),
):
    services = service.get_services_by_price_range(minPrice, maxPrice)
    return [_service_response(s) for s in services]


@router.get("/Find/{service_id}", response_model=ServiceResponse)
def find_service(
    service_id: int,
    _: AuthContext = Depends(require_login),
    service: CatalogueService = Depends(get_catalogue_service),
):
    return _service_response(service.get_service(service_id))


@router.post("/Add", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
def add_service(
    data: ServiceCreate,
    response: Response,
    _: AuthContext = Depends(require_admin),
    service: CatalogueService = Depends(get_catalogue_service),
):
    created = service.create_service(data)
    response.headers["Location"] = f"/api/Services/Find/{created.id}"
    return _service_response(created)


@router.put("/Update/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_service(
    service_id: int,
    data: ServiceUpdate,
    _: AuthContext = Depends(require_admin),
    service: CatalogueService = Depends(get_catalogue_service),
):
    service.update_service(service_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/Delete/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(
    service_id: int,
    _: AuthContext = Depends(require_admin),
    service: CatalogueService = Depends(get_catalogue_service),
):
    """Deletes the service, or deactivates it while active bookings still use it"""
    service.delete_service(service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/ListBookingsByService/{service_id}", response_model=list[BookingDetail])
def list_bookings_by_service(
    service_id: int,
    _: AuthContext = Depends(require_login),
    db: Session = Depends(get_db),
):
    """Bookings using the service, each with its full service list"""
    bookings = BookingLifecycleService(db).list_by_service(service_id)
    return [BookingDetail.from_booking(b) for b in bookings]
