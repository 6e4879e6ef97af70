# core/models/__init__.py
from .book import Book
from .user import User
from .loan import Loan, FINE_PER_DAY

__all__ = [
    'Book',
    'User',
    'Loan',
    'FINE_PER_DAY'
]
