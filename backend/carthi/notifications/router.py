from fastapi import APIRouter, Depends, HTTPException
from typing import List
import uuid

from carthi.notifications.models import Notification
from carthi.notifications.service import NotificationCenter, get_notification_center

router = APIRouter(prefix="/notifications", tags=["notifications"])

@router.get("/", response_model=List[Notification])
def read_notifications(
    unread_only: bool = False,
    center: NotificationCenter = Depends(get_notification_center)
):
    return center.list_notifications(unread_only=unread_only)

@router.get("/unread-count")
def read_unread_count(center: NotificationCenter = Depends(get_notification_center)):
    return {"unread": center.unread_count()}

@router.post("/read-all")
def mark_all_notifications_read(center: NotificationCenter = Depends(get_notification_center)):
    return {"marked": center.mark_all_read()}

@router.post("/{notification_id}/read", response_model=Notification)
def mark_notification_read(
    notification_id: uuid.UUID,
    center: NotificationCenter = Depends(get_notification_center)
):
    notification = center.mark_read(notification_id)
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification

@router.delete("/{notification_id}")
def delete_notification(
    notification_id: uuid.UUID,
    center: NotificationCenter = Depends(get_notification_center)
):
    if not center.delete(notification_id):
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"ok": True}
