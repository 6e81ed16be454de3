# ui/__init__.py

from .spin_view import SpinView

__all__ = [
    'SpinView'
]
