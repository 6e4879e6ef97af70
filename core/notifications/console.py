# core/notifications/console.py

from typing import Optional

import click

from core.models import User
from .base import NotificationService

BROADCAST_RECIPIENT = "all users"


def format_notification(recipient: Optional[User], subject: str, message: str) -> str:
    """Render a notification as a single console line"""
    name = recipient.name if recipient is not None else BROADCAST_RECIPIENT
    return f"[NOTIFY] To: {name} | {subject} - {message}"


class ConsoleNotificationService(NotificationService):
    """Prints notifications to stdout."""

    def notify(self, recipient: Optional[User], subject: str, message: str) -> None:
        click.echo(format_notification(recipient, subject, message))
