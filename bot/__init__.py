# bot/__init__.py

from .roulette_bot import RouletteBot

__all__ = ['RouletteBot']
