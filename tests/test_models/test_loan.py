# tests/test_models/test_loan.py
import pytest
from datetime import datetime, timedelta, UTC
from core.models import Loan, FINE_PER_DAY

NOW = datetime(2024, 3, 1, 10, 0, tzinfo=UTC)

@pytest.fixture
def loan(sample_book, sample_user):
    """A seven day loan opened at NOW."""
    sample_book.borrow()
    return Loan.start(sample_book, sample_user, 7, NOW)

def test_start_sets_dates(loan):
    assert loan.loan_date == NOW
    assert loan.due_date == NOW + timedelta(days=7)
    assert loan.return_date is None
    assert loan.is_outstanding

def test_loan_shares_book_instance(loan, sample_book):
    """The loan refers to the repository's book, not a copy."""
    assert loan.book is sample_book

def test_mark_returned_frees_book(loan, sample_book):
    loan.mark_returned(NOW + timedelta(days=2))
    assert loan.return_date == NOW + timedelta(days=2)
    assert not loan.is_outstanding
    assert sample_book.is_available is True

def test_no_fine_while_outstanding(loan):
    assert loan.calculate_fine() == 0

def test_no_fine_when_returned_on_due_date(loan):
    loan.mark_returned(loan.due_date)
    assert loan.calculate_fine() == 0

def test_no_fine_when_returned_early(loan):
    loan.mark_returned(NOW + timedelta(days=1))
    assert loan.calculate_fine() == 0

def test_fine_for_three_days_late(loan):
    """Three whole days late is charged three days."""
    loan.mark_returned(loan.due_date + timedelta(days=3))
    assert loan.calculate_fine() == 3 * FINE_PER_DAY

def test_partial_day_is_not_charged(loan):
    """Fractions of a day are dropped."""
    loan.mark_returned(loan.due_date + timedelta(days=2, hours=23))
    assert loan.calculate_fine() == 2 * FINE_PER_DAY

def test_less_than_a_day_late_is_free(loan):
    loan.mark_returned(loan.due_date + timedelta(hours=5))
    assert loan.calculate_fine() == 0

def test_custom_fine_rate(loan):
    loan.mark_returned(loan.due_date + timedelta(days=4))
    assert loan.calculate_fine(fine_per_day=0.5) == 2.0

def test_fine_is_pure(loan):
    """Computing the fine does not change the loan."""
    loan.mark_returned(loan.due_date + timedelta(days=3))
    before = loan.model_dump()
    loan.calculate_fine()
    loan.calculate_fine()
    assert loan.model_dump() == before

def test_is_overdue(loan):
    assert not loan.is_overdue(NOW + timedelta(days=7))
    assert loan.is_overdue(NOW + timedelta(days=8))
    loan.mark_returned(NOW + timedelta(days=9))
    assert not loan.is_overdue(NOW + timedelta(days=10))
