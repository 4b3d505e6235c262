"""Notification service - Business logic for owner notifications"""

import logging

from sqlalchemy.orm import Session

from ...models import Notification
from ...shared.exceptions import NotFoundException, ValidationException
from ..owners.repository import OwnerRepository
from .repository import NotificationRepository
from .schemas import NotificationCreate, NotificationUpdate

logger = logging.getLogger(__name__)


def _notification_fields(data: NotificationCreate) -> dict:
    return {
        "owner_id": data.ownerId,
        "title": data.title,
        "message": data.message,
        "type": data.type,
        "is_read": data.isRead,
    }


class NotificationService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = NotificationRepository()
        self.owners = OwnerRepository()

    def get_notifications(self) -> list[Notification]:
        return self.repo.get_notifications(self.db)

    def get_notification(self, notification_id: int) -> Notification:
        notification = self.repo.get_notification_by_id(self.db, notification_id)
        if not notification:
            raise NotFoundException(f"Notification with ID {notification_id} not found.")
        return notification

    def get_notifications_for_owner(self, owner_id: int) -> list[Notification]:
        if not self.owners.owner_exists(self.db, owner_id):
            raise NotFoundException(f"Owner with ID {owner_id} not found.")
        return self.repo.get_notifications(self.db, owner_id=owner_id)

    def _require_owner(self, owner_id: int) -> None:
        if not self.owners.owner_exists(self.db, owner_id):
            raise ValidationException("Invalid OwnerId: Owner does not exist.")

    def create_notification(self, data: NotificationCreate) -> Notification:
        self._require_owner(data.ownerId)
        notification = self.repo.create_notification(self.db, **_notification_fields(data))
        logger.info(f"📧 Notification {notification.id} ({notification.type}) sent to owner {data.ownerId}")
        return self.get_notification(notification.id)

    def update_notification(self, notification_id: int, data: NotificationUpdate) -> Notification:
        if notification_id != data.id:
            raise ValidationException("Notification ID mismatch.")

        notification = self.get_notification(notification_id)
        self._require_owner(data.ownerId)
        self.repo.update_notification(self.db, notification, **_notification_fields(data))
        logger.info(f"✅ Updated notification {notification_id}")
        return self.get_notification(notification_id)

    def mark_read(self, notification_id: int) -> Notification:
        notification = self.get_notification(notification_id)
        if not notification.is_read:
            self.repo.update_notification(self.db, notification, is_read=True)
        return self.get_notification(notification_id)

    def delete_notification(self, notification_id: int) -> None:
        notification = self.get_notification(notification_id)
        self.repo.delete_notification(self.db, notification)
        logger.info(f"🗑️ Deleted notification {notification_id}")
