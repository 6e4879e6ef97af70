# tests/conftest.py
import sys
import pytest
from pathlib import Path
from datetime import datetime, UTC

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from core.config import LibrarySettings
from core.models import Book, User, Loan
from core.notifications import MemoryNotificationService
from core.repositories import InMemoryRepository
from core.services.library_service import LibraryService
from core.utils.clock import ManualClock

START = datetime(2024, 3, 1, 10, 0, tzinfo=UTC)

@pytest.fixture
def clock():
    """A clock frozen at a known start time."""
    return ManualClock(START)

@pytest.fixture
def notifier():
    return MemoryNotificationService()

@pytest.fixture
def book_repo():
    return InMemoryRepository[Book]()

@pytest.fixture
def user_repo():
    return InMemoryRepository[User]()

@pytest.fixture
def loan_repo():
    return InMemoryRepository[Loan]()

@pytest.fixture
def service(book_repo, user_repo, loan_repo, notifier, clock):
    """A LibraryService over empty in-memory repositories."""
    return LibraryService(book_repo, user_repo, loan_repo, notifier,
                          clock=clock, settings=LibrarySettings())

@pytest.fixture
def sample_book():
    return Book(title="Clean Code", author="Robert C. Martin", isbn="978-0132350884")

@pytest.fixture
def sample_user():
    return User(name="John Smith", id=1)

@pytest.fixture
def stocked_service(service):
    """Service with the Clean Code book and user 1 registered."""
    service.register_book("Clean Code", "Robert C. Martin", "978-0132350884")
    service.register_user("John Smith", 1)
    service.notifier.clear()
    return service
