"""
Interaction strategies for the crop box.

This package implements the Strategy pattern for the two crop interactions
(move vs corner resize), allowing clean separation of logic.
"""

from .abstract import InteractionStrategy
from .move_strategy import MoveStrategy
from .resize_strategy import CORNER_SIGNS, ResizeStrategy

__all__ = [
    "CORNER_SIGNS",
    "InteractionStrategy",
    "MoveStrategy",
    "ResizeStrategy",
]
