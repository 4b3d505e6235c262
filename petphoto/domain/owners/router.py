"""Owner router - FastAPI endpoints for owner operations"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from ...models import Owner
from .schemas import (
    OwnerCreate,
    OwnerDetailResponse,
    OwnerPetSummary,
    OwnerResponse,
    OwnerUpdate,
)
from .service import OwnerService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/Owners", tags=["Owners"])


def get_owner_service(db: Session = Depends(get_db)) -> OwnerService:
    """Dependency injection for OwnerService"""
    return OwnerService(db)


def _owner_response(owner: Owner, pet_count: int = 0) -> OwnerResponse:
    return OwnerResponse(
        id=owner.id,
        name=owner.name,
        email=owner.email,
        phone=owner.phone,
        address=owner.address,
        petCount=pet_count,
        created_at=owner.created_at,
    )


@router.get("", response_model=list[OwnerResponse])
def list_owners(
    _: AuthContext = Depends(require_login),
    service: OwnerService = Depends(get_owner_service),
):
    """List owners with their pet counts"""
    return [_owner_response(owner, count) for owner, count in service.get_owners()]


@router.get("/{owner_id}", response_model=OwnerDetailResponse)
def get_owner(
    owner_id: int,
    _: AuthContext = Depends(require_login),
    service: OwnerService = Depends(get_owner_service),
):
    """Get an owner together with their pets"""
    owner = service.get_owner(owner_id, with_pets=True)
    return OwnerDetailResponse(
        **_owner_response(owner, len(owner.pets)).model_dump(),
        pets=[
            OwnerPetSummary(id=p.id, name=p.name, species=p.species, breed=p.breed, age=p.age)
            for p in owner.pets
        ],
    )


@router.post("", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED)
def create_owner(
    data: OwnerCreate,
    response: Response,
    _: AuthContext = Depends(require_admin),
    service: OwnerService = Depends(get_owner_service),
):
    owner = service.create_owner(data)
    response.headers["Location"] = f"/api/Owners/{owner.id}"
    return _owner_response(owner)


@router.put("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_owner(
    owner_id: int,
    data: OwnerUpdate,
    _: AuthContext = Depends(require_admin),
    service: OwnerService = Depends(get_owner_service),
):
    service.update_owner(owner_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner(
    owner_id: int,
    _: AuthContext = Depends(require_admin),
    service: OwnerService = Depends(get_owner_service),
):
    """Delete an owner along with their pets, bookings and notifications"""
    service.delete_owner(owner_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
