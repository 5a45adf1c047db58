"""
Rat and Warehouse Keepers Session Layer.

Inbound inputs, outbound queries and event notifications for the
presentation layer.
"""

from src.session.events import EventPayload, GameEvent, classify_result, events_for_result
from src.session.game_session import GameSession, InputKind
from src.session.models import FootprintView, GameView

__all__ = [
    "EventPayload",
    "FootprintView",
    "GameEvent",
    "GameSession",
    "GameView",
    "InputKind",
    "classify_result",
    "events_for_result",
]
