# core/repositories/__init__.py
from .base import Repository
from .memory import InMemoryRepository

__all__ = ['Repository', 'InMemoryRepository']
