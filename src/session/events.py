"""
Rat and Warehouse Keepers - Session Event Definitions

Event types and payloads sent to the presentation layer after each input.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from src.engine.base import ActionResult, Outcome, Position, Role


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_RESET = auto()
    PIECE_PLACED = auto()
    PLACEMENT_COMPLETE = auto()
    ROUND_STARTED = auto()
    MOUSE_MOVED = auto()
    KEEPER_MOVED = auto()
    CHECKED_EMPTY = auto()
    FOOTPRINT_FOUND = auto()
    MOUSE_CAUGHT = auto()
    ROUND_ENDED = auto()
    GAME_WON = auto()
    ACTION_REJECTED = auto()


@dataclass(frozen=True)
class EventPayload:
    """Notification delivered to session listeners."""

    event: GameEvent
    role: Role | None = None
    position: Position | None = None
    data: dict[str, Any] = field(default_factory=dict)


# Map successful outcomes to their primary game event
_OUTCOME_EVENT_MAP: dict[Outcome, GameEvent] = {
    Outcome.RESET: GameEvent.GAME_RESET,
    Outcome.PLACED: GameEvent.PIECE_PLACED,
    Outcome.PLACEMENT_COMPLETE: GameEvent.PLACEMENT_COMPLETE,
    Outcome.ROUND_STARTED: GameEvent.ROUND_STARTED,
    Outcome.CHECKED_EMPTY: GameEvent.CHECKED_EMPTY,
    Outcome.CHECKED_FOOTPRINT: GameEvent.FOOTPRINT_FOUND,
    Outcome.CAPTURED: GameEvent.MOUSE_CAUGHT,
    Outcome.GAME_ENDED: GameEvent.GAME_WON,
}


def classify_result(result: ActionResult) -> GameEvent:
    """Determine the primary game event for an action result."""
    if result.is_rejected:
        return GameEvent.ACTION_REJECTED
    if result.outcome is Outcome.MOVED:
        if result.role is Role.MOUSE:
            return GameEvent.MOUSE_MOVED
        return GameEvent.KEEPER_MOVED
    return _OUTCOME_EVENT_MAP[result.outcome]


def events_for_result(result: ActionResult) -> list[GameEvent]:
    """
    List every event an action result should raise, in delivery order.

    A capture also wins the game, and the last keeper's action also ends
    the round, so some results raise two events.
    """
    events = [classify_result(result)]
    if result.outcome is Outcome.CAPTURED:
        events.append(GameEvent.GAME_WON)
    if result.round_ended:
        events.append(GameEvent.ROUND_ENDED)
    return events
