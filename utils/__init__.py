# utils/__init__.py

from .embed_builder import EmbedBuilder
from .translations import Translations

__all__ = [
    'EmbedBuilder',
    'Translations'
]
