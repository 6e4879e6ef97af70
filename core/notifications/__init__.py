# core/notifications/__init__.py
from .base import NotificationService
from .console import ConsoleNotificationService, format_notification
from .memory import MemoryNotificationService, Notification

__all__ = [
    'NotificationService',
    'ConsoleNotificationService',
    'MemoryNotificationService',
    'Notification',
    'format_notification'
]
