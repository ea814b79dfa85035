"""Notification journal routes."""

from fastapi import APIRouter, Depends, Request, status

from .notification_log import NotificationEntry, NotificationLog
from .notifications_schemas import NotificationCreateRequest, NotificationPayload

router = APIRouter(prefix="/api/notifications", tags=["notifications"])


def get_notification_log(request: Request) -> NotificationLog:
    try:
        return request.app.state.notifications  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover
        raise RuntimeError("NotificationLog is not configured") from exc


@router.get("/")
def recent_notifications(
    log: NotificationLog = Depends(get_notification_log),
) -> list[NotificationPayload]:
    return [_payload(entry) for entry in log.recent()]


@router.post("/", status_code=status.HTTP_201_CREATED)
def post_notification(
    payload: NotificationCreateRequest,
    log: NotificationLog = Depends(get_notification_log),
) -> NotificationPayload:
    return _payload(log.record(payload.message))


def _payload(entry: NotificationEntry) -> NotificationPayload:
    return NotificationPayload(timestamp=entry.timestamp, message=entry.message, text=entry.render())
