import logging
from typing import Optional

import click

from core.config import LibrarySettings
from core.models import Book, Loan, User
from core.notifications import ConsoleNotificationService, NotificationService
from core.repositories import InMemoryRepository
from core.services.library_service import LibraryService
from core.utils.clock import Clock

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, INFO and up when verbose, WARNING otherwise"""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(logging.INFO if verbose else logging.WARNING)


def build_service(clock: Optional[Clock] = None,
                  notifier: Optional[NotificationService] = None,
                  settings: Optional[LibrarySettings] = None) -> LibraryService:
    """Wire a LibraryService with one in-memory repository per entity type"""
    return LibraryService(
        book_repo=InMemoryRepository[Book](),
        user_repo=InMemoryRepository[User](),
        loan_repo=InMemoryRepository[Loan](),
        notifier=notifier or ConsoleNotificationService(),
        clock=clock,
        settings=settings
    )


def print_summary(service: LibraryService) -> None:
    """Print the books, users and loans held by a service"""
    click.echo("\n" + click.style("Books:", fg='blue'))
    for book in service.get_all_books():
        status = click.style("available", fg='green') if book.is_available else click.style("on loan", fg='yellow')
        click.echo(f"  - {book.title} by {book.author} ({book.isbn}) [{status}]")

    click.echo(click.style("Users:", fg='blue'))
    for user in service.get_all_users():
        click.echo(f"  - {user.name} (ID: {user.id})")

    click.echo(click.style("Loans:", fg='blue'))
    for loan in service.get_all_loans():
        returned = loan.return_date.date().isoformat() if loan.return_date else "outstanding"
        click.echo(f"  - {loan.book.title} -> {loan.user.name}, "
                   f"due {loan.due_date.date().isoformat()}, returned: {returned}")
