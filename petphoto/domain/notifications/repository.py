"""Notification repository - Database operations for notifications"""

from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Notification


class NotificationRepository:
    """Repository for notification database operations"""

    @staticmethod
    def get_notifications(db: Session, owner_id: Optional[int] = None) -> list[Notification]:
        """Newest first"""
        query = db.query(Notification).options(joinedload(Notification.owner))
        if owner_id is not None:
            query = query.filter(Notification.owner_id == owner_id)
        return query.order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    @staticmethod
    def get_notification_by_id(db: Session, notification_id: int) -> Optional[Notification]:
        return (
            db.query(Notification)
            .options(joinedload(Notification.owner))
            .filter(Notification.id == notification_id)
            .first()
        )

    @staticmethod
    def create_notification(db: Session, **data) -> Notification:
        notification = Notification(**data)
        db.add(notification)
        db.commit()
        db.refresh(notification)
        return notification

    @staticmethod
    def update_notification(db: Session, notification: Notification, **fields) -> Notification:
        for key, value in fields.items():
            setattr(notification, key, value)
        db.commit()
        db.refresh(notification)
        return notification

    @staticmethod
    def delete_notification(db: Session, notification: Notification) -> None:
        db.delete(notification)
        db.commit()
