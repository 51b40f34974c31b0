"""
Notification Endpoints

Endpoints:
----------
- GET    /notifications                 - List user notifications (newest first)
- GET    /notifications/unread-count    - Get unread count
- POST   /notifications                 - Add a notification
- POST   /notifications/{id}/read       - Mark one as read
- POST   /notifications/mark-all-read   - Mark all as read
- DELETE /notifications/{id}            - Delete one
- DELETE /notifications                 - Clear all
"""

import logging
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_notification_service
from app.schemas.notification import (
    MarkAllReadResponse,
    Notification,
    NotificationCreate,
    NotificationListResponse,
    UnreadCountResponse,
)
from app.services.notification_service import (
    DuplicateNotificationError,
    NotificationNotFoundError,
    NotificationService,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get(
    "",
    response_model=NotificationListResponse,
    summary="List notifications for the current user",
)
async def list_notifications(
    service: NotificationService = Depends(get_notification_service),
):
    notifications = await service.list_notifications()
    return NotificationListResponse(
        notifications=notifications,
        total=len(notifications),
        unread_count=sum(1 for n in notifications if not n.read),
    )


@router.get(
    "/unread-count",
    response_model=UnreadCountResponse,
    summary="Get count of unread notifications",
)
async def unread_count(
    service: NotificationService = Depends(get_notification_service),
):
    return UnreadCountResponse(unread_count=await service.unread_count())


@router.post(
    "",
    response_model=Notification,
    status_code=status.HTTP_201_CREATED,
    summary="Add a notification",
)
async def add_notification(
    request: NotificationCreate,
    service: NotificationService = Depends(get_notification_service),
):
    try:
        return await service.add(request)
    except DuplicateNotificationError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post(
    "/mark-all-read",
    response_model=MarkAllReadResponse,
    summary="Mark all notifications as read",
)
async def mark_all_read(
    service: NotificationService = Depends(get_notification_service),
):
    updated = await service.mark_all_read()
    return MarkAllReadResponse(updated=updated)


@router.post(
    "/{notification_id}/read",
    response_model=Notification,
    summary="Mark a notification as read",
)
async def mark_read(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
):
    try:
        return await service.mark_read(notification_id)
    except NotificationNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )


@router.delete(
    "/{notification_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a notification",
)
async def delete_notification(
    notification_id: str,
    service: NotificationService = Depends(get_notification_service),
):
    try:
        await service.remove(notification_id)
    except NotificationNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )


@router.delete(
    "",
    summary="Clear all notifications",
)
async def clear_notifications(
    service: NotificationService = Depends(get_notification_service),
):
    removed = await service.clear()
    return {"removed": removed, "message": "All notifications cleared."}
