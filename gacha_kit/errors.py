"""
Gacha Kit - Errors
==================
Both error kinds are raised eagerly, before any draw consumes randomness.
"""


class GachaError(Exception):
    """Base class for all gacha-kit errors."""


class InvalidConfiguration(GachaError, ValueError):
    """The catalog (or its guaranteed-rarity subset) cannot support the operation."""


class InvalidArgument(GachaError, ValueError):
    """A caller-supplied parameter violates its precondition."""
