# core/services/library_service.py

import logging
from typing import List, Optional

from core.config import LibrarySettings
from core.models import Book, Loan, User
from core.notifications import NotificationService
from core.repositories import Repository
from core.utils.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class LibraryService:
    """Registers books and users and runs the loan lifecycle.

    Collaborators are injected so storage, delivery and time can be swapped
    out. Failures are reported through return values: ``borrow_book`` returns
    False and ``return_book`` returns None when there is nothing to act on.
    """

    def __init__(self,
                 book_repo: Repository[Book],
                 user_repo: Repository[User],
                 loan_repo: Repository[Loan],
                 notifier: NotificationService,
                 clock: Optional[Clock] = None,
                 settings: Optional[LibrarySettings] = None):
        self.book_repo = book_repo
        self.user_repo = user_repo
        self.loan_repo = loan_repo
        self.notifier = notifier
        self.clock = clock or SystemClock()
        self.settings = settings or LibrarySettings()

    def register_book(self, title: str, author: str, isbn: str) -> Book:
        """Add a book to the catalogue and announce it to everyone"""
        book = Book(title=title, author=author, isbn=isbn)
        self.book_repo.add(book)
        logger.info(f"Registered book: {title} ({isbn})")
        self.notifier.notify(None, "New Book", f"{title} registered in the library.")
        return book

    def register_user(self, name: str, id: int) -> User:
        """Add a user and send them a welcome message"""
        user = User(name=name, id=id)
        self.user_repo.add(user)
        logger.info(f"Registered user: {name} ({id})")
        self.notifier.notify(user, "Welcome", "You have been registered in the library.")
        return user

    def borrow_book(self, user_id: int, isbn: str, days: int) -> bool:
        """Lend an available book to a user.

        Args:
            user_id: ID of the borrowing user
            isbn: ISBN of the book to lend
            days: Length of the loan in days

        Returns:
            True if the loan was created, False if the user is unknown or
            no available copy with that ISBN exists
        """
        user = self.user_repo.get(lambda u: u.id == user_id)
        book = self.book_repo.get(lambda b: b.isbn == isbn and b.is_available)
        if user is None or book is None:
            logger.warning(f"Cannot lend {isbn} to user {user_id}: user or available book not found")
            return False

        book.borrow()
        loan = Loan.start(book, user, days, self.clock.now())
        self.loan_repo.add(loan)
        logger.info(f"User {user_id} borrowed {isbn}, due {loan.due_date.isoformat()}")
        self.notifier.notify(user, "Loan", f"You borrowed: {book.title}")
        return True

    def return_book(self, user_id: int, isbn: str) -> Optional[float]:
        """Close a user's outstanding loan of a book.

        Args:
            user_id: ID of the user returning the book
            isbn: ISBN of the returned book

        Returns:
            The fine owed (0.0 when returned on time), or None if the user
            has no outstanding loan for that ISBN
        """
        loan = self.loan_repo.get(
            lambda l: l.user.id == user_id and l.book.isbn == isbn and l.is_outstanding
        )
        if loan is None:
            logger.warning(f"No active loan of {isbn} for user {user_id}")
            return None

        loan.mark_returned(self.clock.now())
        fine = loan.calculate_fine(self.settings.fine_per_day)
        logger.info(f"User {user_id} returned {isbn}, fine {fine:.2f}")
        if fine > 0:
            self.notifier.notify(loan.user, "Fine", f"You have a fine of {fine:.2f}")
        return fine

    def get_all_books(self) -> List[Book]:
        return self.book_repo.get_all()

    def get_all_users(self) -> List[User]:
        return self.user_repo.get_all()

    def get_all_loans(self) -> List[Loan]:
        return self.loan_repo.get_all()

    def get_active_loans(self) -> List[Loan]:
        """Loans whose book has not been returned yet"""
        return [loan for loan in self.loan_repo.get_all() if loan.is_outstanding]

    def get_overdue_loans(self) -> List[Loan]:
        """Outstanding loans past their due date at the current time"""
        now = self.clock.now()
        return [loan for loan in self.loan_repo.get_all() if loan.is_overdue(now)]
