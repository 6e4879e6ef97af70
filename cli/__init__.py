"""CLI package for Library Circulation"""
from .main import cli
from .commands.demo import demo

__all__ = ['cli', 'demo']
