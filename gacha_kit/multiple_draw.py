"""
Gacha Kit - Multi-Draw
======================
Fixed-size batch draw (the classic "10-pull").

Usage:
    engine = DrawEngine(catalog)
    drawer = MultipleDraw(engine, draw_count=10)
    results = drawer.execute()
"""

from typing import Any, List

from .constants import DEFAULT_DRAW_COUNT
from .engine import DrawEngine, validate_draw_count
from .errors import InvalidArgument


class MultipleDraw:
    """Draws a fixed number of cards from an engine in one operation."""

    DEFAULT_DRAW_COUNT = DEFAULT_DRAW_COUNT

    def __init__(self, engine: DrawEngine, draw_count: int = DEFAULT_DRAW_COUNT):
        if not isinstance(engine, DrawEngine):
            raise InvalidArgument("Engine must be a DrawEngine instance")
        validate_draw_count(draw_count)

        self.engine = engine
        self.draw_count = draw_count

    def execute(self) -> List[Any]:
        """Run the batch and return the drawn cards in order."""
        return self.engine.draw_multiple(self.draw_count)

    draw = execute

    def __repr__(self) -> str:
        return f"MultipleDraw(draw_count={self.draw_count})"
