# core/notifications/base.py

from abc import ABC, abstractmethod
from typing import Optional

from core.models import User


class NotificationService(ABC):
    """Delivers a message to a user, or to everyone when no user is given."""

    @abstractmethod
    def notify(self, recipient: Optional[User], subject: str, message: str) -> None:
        """Send a notification.

        Args:
            recipient: The user to notify, None for a broadcast
            subject: Short subject line
            message: Message body
        """
        pass
