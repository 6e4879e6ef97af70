# core/notifications/memory.py

from dataclasses import dataclass
from typing import List, Optional

from core.models import User
from .base import NotificationService


@dataclass(frozen=True)
class Notification:
    recipient: Optional[User]
    subject: str
    message: str

    @property
    def is_broadcast(self) -> bool:
        return self.recipient is None


class MemoryNotificationService(NotificationService):
    """Keeps every notification in order instead of delivering it."""

    def __init__(self):
        self.sent: List[Notification] = []

    def notify(self, recipient: Optional[User], subject: str, message: str) -> None:
        self.sent.append(Notification(recipient, subject, message))

    def sent_to(self, user_id: int) -> List[Notification]:
        """Notifications addressed to a specific user"""
        return [n for n in self.sent if n.recipient is not None and n.recipient.id == user_id]

    def clear(self) -> None:
        self.sent.clear()
