# cogs/__init__.py

from .roulette_cog import RouletteCog

__all__ = ['RouletteCog']
