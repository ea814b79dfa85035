from .notification_log import NOTIFICATION_LIMIT, NotificationEntry, NotificationLog

__all__ = ["NOTIFICATION_LIMIT", "NotificationEntry", "NotificationLog"]
