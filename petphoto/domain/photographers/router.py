"""Photographer router - FastAPI endpoints for photographer operations"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from ...models import Photographer
from .schemas import PhotographerCreate, PhotographerResponse, PhotographerUpdate
from .service import PhotographerService

router = APIRouter(prefix="/api/Photographers", tags=["Photographers"])


def get_photographer_service(db: Session = Depends(get_db)) -> PhotographerService:
    """Dependency injection for PhotographerService"""
    return PhotographerService(db)


def _photographer_response(photographer: Photographer) -> PhotographerResponse:
    return PhotographerResponse(
        id=photographer.id,
        name=photographer.name,
        email=photographer.email,
        phone=photographer.phone,
        specialty=photographer.specialty,
        isAvailable=photographer.is_available,
    )


@router.get("", response_model=list[PhotographerResponse])
def list_photographers(
    available_only: bool = Query(False, description="Only photographers open for new bookings"),
    _: AuthContext = Depends(require_login),
    service: PhotographerService = Depends(get_photographer_service),
):
    photographers = service.get_photographers(available_only=available_only)
    return [_photographer_response(p) for p in photographers]


@router.get("/{photographer_id}", response_model=PhotographerResponse)
def get_photographer(
    photographer_id: int,
    _: AuthContext = Depends(require_login),
    service: PhotographerService = Depends(get_photographer_service),
):
    return _photographer_response(service.get_photographer(photographer_id))


@router.post("", response_model=PhotographerResponse, status_code=status.HTTP_201_CREATED)
def create_photographer(
    data: PhotographerCreate,
    response: Response,
    _: AuthContext = Depends(require_admin),
    service: PhotographerService = Depends(get_photographer_service),
):
    photographer = service.create_photographer(data)
    response.headers["Location"] = f"/api/Photographers/{photographer.id}"
    return _photographer_response(photographer)


@router.put("/{photographer_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_photographer(
    photographer_id: int,
    data: PhotographerUpdate,
    _: AuthContext = Depends(require_admin),
    service: PhotographerService = Depends(get_photographer_service),
):
    service.update_photographer(photographer_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{photographer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_photographer(
    photographer_id: int,
    _: AuthContext = Depends(require_admin),
    service: PhotographerService = Depends(get_photographer_service),
):
    """Delete a photographer that no booking is assigned to"""
    service.delete_photographer(photographer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
