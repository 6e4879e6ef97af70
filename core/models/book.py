# core/models/book.py

from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A book held by the library.

    Availability is toggled through ``borrow`` and ``return_book``; neither
    checks the current state, callers decide whether a toggle is allowed.
    """
    model_config = ConfigDict(from_attributes=True)

    title: str
    author: str
    isbn: str
    is_available: bool = True

    def borrow(self) -> None:
        self.is_available = False

    def return_book(self) -> None:
        self.is_available = True
