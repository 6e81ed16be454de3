"""
Roulette Errors
"""


class RouletteError(Exception):
    pass


class InvalidInputError(RouletteError, ValueError):
    """Raised when the wheel geometry is asked for zero (or fewer) notes."""
