# core/models/loan.py

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel

from .book import Book
from .user import User

FINE_PER_DAY = 1.0


class Loan(BaseModel):
    """A book lent to a user.

    The loan refers to the same Book and User instances held by their
    repositories, so returning a loan makes the shared book available again.
    """

    book: Book
    user: User
    loan_date: datetime
    due_date: datetime
    return_date: Optional[datetime] = None

    @classmethod
    def start(cls, book: Book, user: User, duration_days: int, now: datetime) -> "Loan":
        """Open a loan at ``now`` that is due ``duration_days`` later."""
        return cls(
            book=book,
            user=user,
            loan_date=now,
            due_date=now + timedelta(days=duration_days)
        )

    @property
    def is_outstanding(self) -> bool:
        return self.return_date is None

    def is_overdue(self, now: datetime) -> bool:
        return self.is_outstanding and now > self.due_date

    def mark_returned(self, now: datetime) -> None:
        """Record the return and put the book back on the shelf.

        Calling this twice overwrites the return date; callers only return
        outstanding loans.
        """
        self.return_date = now
        self.book.return_book()

    def calculate_fine(self, fine_per_day: float = FINE_PER_DAY) -> float:
        """Fine owed for this loan, charged per whole day late."""
        if self.return_date is None or self.return_date <= self.due_date:
            return 0.0

        days_late = (self.return_date - self.due_date).days
        return days_late * fine_per_day
