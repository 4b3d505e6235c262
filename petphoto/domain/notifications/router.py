"""Notification router - FastAPI endpoints for owner notifications"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ...auth import AuthContext, require_admin, require_login
from ...database import get_db
from ...models import Notification
from .schemas import NotificationCreate, NotificationResponse, NotificationUpdate
from .service import NotificationService

router = APIRouter(prefix="/api/Notifications", tags=["Notifications"])


def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    """Dependency injection for NotificationService"""
    return NotificationService(db)


def _notification_response(notification: Notification) -> NotificationResponse:
    return NotificationResponse(
        id=notification.id,
        ownerId=notification.owner_id,
        ownerName=notification.owner.name if notification.owner else "Unknown",
        title=notification.title,
        message=notification.message,
        type=notification.type,
        isRead=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("", response_model=list[NotificationResponse])
def list_notifications(
    _: AuthContext = Depends(require_login),
    service: NotificationService = Depends(get_notification_service),
):
    return [_notification_response(n) for n in service.get_notifications()]


@router.get("/ForOwner/{owner_id}", response_model=list[NotificationResponse])
def list_notifications_for_owner(
    owner_id: int,
    _: AuthContext = Depends(require_login),
    service: NotificationService = Depends(get_notification_service),
):
    return [_notification_response(n) for n in service.get_notifications_for_owner(owner_id)]


@router.get("/{notification_id}", response_model=NotificationResponse)
def get_notification(
    notification_id: int,
    _: AuthContext = Depends(require_login),
    service: NotificationService = Depends(get_notification_service),
):
    return _notification_response(service.get_notification(notification_id))


@router.post("", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
def create_notification(
    data: NotificationCreate,
    response: Response,
    _: AuthContext = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
):
    notification = service.create_notification(data)
    response.headers["Location"] = f"/api/Notifications/{notification.id}"
    return _notification_response(notification)


@router.put("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_notification(
    notification_id: int,
    data: NotificationUpdate,
    _: AuthContext = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
):
    service.update_notification(notification_id, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{notification_id}/MarkRead", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    _: AuthContext = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
):
    return _notification_response(service.mark_read(notification_id))


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: int,
    _: AuthContext = Depends(require_admin),
    service: NotificationService = Depends(get_notification_service),
):
    service.delete_notification(notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
