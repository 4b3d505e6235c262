"""Pet router - FastAPI endpoints for pet operations"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from ...models import Pet
from .schemas import PetCreate, PetResponse, PetUpdate
from .service import PetService

router = APIRouter(prefix="/api/Pets", tags=["Pets"])


def get_pet_service(db: Session = Depends(get_db)) -> PetService:
    """Dependency injection for PetService"""
    return PetService(db)


def _pet_response(pet: Pet) -> PetResponse:
    return PetResponse(
        id=pet.id,
        ownerId=pet.owner_id,
        ownerName=pet.owner.name if pet.owner else "Unknown",
        name=pet.name,
        species=pet.species,
        breed=pet.breed,
        age=pet.age,
        color=pet.color,
        notes=pet.notes,
        photoPath=pet.photo_path,
        created_at=pet.created_at,
    )


@router.get("", response_model=list[PetResponse])
def list_pets(
    _: AuthContext = Depends(require_login),
    service: PetService = Depends(get_pet_service),
):
    return [_pet_response(p) for p in service.get_pets()]


@router.get("/ByOwner/{owner_id}", response_model=list[PetResponse])
def list_pets_by_owner(
    owner_id: int,
    _: AuthContext = Depends(require_login),
    service: PetService = Depends(get_pet_service),
):
    return [_pet_response(p) for p in service.get_pets_by_owner(owner_id)]


@router.get("/BySpecies/{species}", response_model=list[PetResponse])
def list_pets_by_species(
    species: str,
    _: AuthContext = Depends(require_login),
    service: PetService = Depends(get_pet_service),
):
    """Case-insensitive species filter"""
    return [_pet_response(p) for p in service.get_pets_by_species(species)]


@router.get("/{pet_id}", response_model=PetResponse)
def get_pet(
    pet_id: int,
    _: AuthContext = Depends(require_login),
    service: PetService = Depends(get_pet_service),
):
    return _pet_response(service.get_pet(pet_id))


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
def create_pet(
    data: PetCreate,
    response: Response,
    _: AuthContext = Depends(require_admin),
    service: PetService = Depends(get_pet_service),
):
    pet = service.create_pet(data)
    response.headers["Location"] = f"/api/Pets/{pet.id}"
    return _pet_response(pet)


@router.put("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_pet(
    pet_id: int,
    data: PetUpdate,
    _: AuthContext = Depends(require_admin),
    service: PetService = Depends(get_pet_service),
):
    service.update_pet(pet_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet(
    pet_id: int,
    _: AuthContext = Depends(require_admin),
    service: PetService = Depends(get_pet_service),
):
    service.delete_pet(pet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
