"""
Rat and Warehouse Keepers - Game Session

The single entry point for the presentation layer. A GameSession owns one
GameState, routes inputs to the stateless engines through a phase-indexed
dispatch table, and notifies listeners of what happened. Queries apply the
Mouse visibility rule so the display never learns more than it may show.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Any, Callable

from src.config.settings import Settings, get_settings
from src.engine.base import (
    ActionResult,
    FootprintMarker,
    GameConfig,
    Outcome,
    Phase,
    Position,
    Role,
    Winner,
)
from src.engine.board import Board
from src.engine.placement import PlacementEngine
from src.engine.state import GameState
from src.engine.turns import TurnEngine
from src.engine.validators import validate_coordinates
from src.session.events import EventPayload, events_for_result
from src.session.models import GameView

logger = logging.getLogger(__name__)

Listener = Callable[[EventPayload], None]


class InputKind(Enum):
    """Kinds of input the presentation layer can send."""

    COORDINATE = auto()
    ROUND_START = auto()


class GameSession:
    """Owns a game and exposes the inbound and outbound interface.

    Inputs never raise for bad user actions: every rejection comes back as
    an ActionResult and leaves the game untouched.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config or GameConfig()
        self._state = GameState.new(self._config)
        self._last_result: ActionResult | None = None
        self._listeners: list[Listener] = []
        self._dispatch: dict[tuple[Phase, InputKind], Callable[..., tuple[GameState, ActionResult]]] = {
            (Phase.SETUP, InputKind.COORDINATE): PlacementEngine.place_at,
            (Phase.PLAYING, InputKind.COORDINATE): TurnEngine.submit,
            (Phase.ROUND_TRANSITION, InputKind.ROUND_START): TurnEngine.start_next_round,
        }

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GameSession:
        """Create a session configured from environment settings."""
        settings = settings or get_settings()
        return cls(settings.to_game_config())

    # -- Listeners -------------------------------------------------------

    def subscribe(self, on_event: Listener) -> None:
        """Register a callback receiving an EventPayload for each change."""
        if on_event in self._listeners:
            logger.warning("Listener %r already subscribed", on_event)
            return
        self._listeners.append(on_event)

    def unsubscribe(self, on_event: Listener) -> None:
        if on_event in self._listeners:
            self._listeners.remove(on_event)

    # -- Inbound ---------------------------------------------------------

    def submit_coordinate(self, role: Role, x: Any, y: Any) -> ActionResult:
        """Handle a cell selected by the given role.

        Args:
            role: Role the user is acting as.
            x: Column of the selected cell.
            y: Row of the selected cell.

        Returns:
            The ActionResult describing what happened.
        """
        if not isinstance(role, Role):
            return self._record(ActionResult(
                outcome=Outcome.ACTION_OUT_OF_PHASE,
                message=f"Unknown role {role!r}.",
            ))

        if self._state.is_over:
            return self._record(self._game_over_result(role))

        handler = self._dispatch.get((self._state.phase, InputKind.COORDINATE))
        if handler is None:
            return self._record(ActionResult(
                outcome=Outcome.ACTION_OUT_OF_PHASE,
                role=role,
                message=f"Cells cannot be selected during the {self._phase_name()} phase.",
            ))

        if role is not self._state.active_role:
            expected = self._state.active_role
            return self._record(ActionResult(
                outcome=Outcome.ACTION_OUT_OF_PHASE,
                role=role,
                message=f"It is {expected.label}'s turn, not {role.label}'s.",
            ))

        try:
            col, row = validate_coordinates(x, y, self._state.board.size)
        except ValueError as exc:
            return self._record(ActionResult(
                outcome=Outcome.OUT_OF_BOUNDS,
                role=role,
                message=str(exc),
            ))

        return self._apply(handler, Position(col, row))

    def trigger_round_start(self) -> ActionResult:
        """Start the next round (or the first one, after setup)."""
        if self._state.is_over:
            return self._record(self._game_over_result())

        handler = self._dispatch.get((self._state.phase, InputKind.ROUND_START))
        if handler is None:
            return self._record(ActionResult(
                outcome=Outcome.ACTION_OUT_OF_PHASE,
                message=f"A round cannot be started during the {self._phase_name()} phase.",
            ))
        return self._apply(handler)

    def reset(self) -> ActionResult:
        """Discard the current game and start a fresh one."""
        logger.info("Resetting game (was %s, round %d)", self._state.phase.value, self._state.turn_number)
        self._state = GameState.new(self._config)
        return self._record(ActionResult(
            outcome=Outcome.RESET,
            role=Role.MOUSE,
            message="New game. Mouse, choose a storage cell to hide in.",
        ))

    # -- Outbound queries ------------------------------------------------

    def get_phase(self) -> Phase:
        return self._state.phase

    def get_active_role(self) -> Role | None:
        return self._state.active_role

    def get_turn_number(self) -> int:
        return self._state.turn_number

    def get_board(self) -> Board:
        return self._state.board

    def get_visible_mouse_position(self) -> Position | None:
        return self._state.visible_mouse_position

    def get_keeper_positions(self) -> tuple[Position | None, ...]:
        return self._state.keeper_positions

    def get_found_footprints(self) -> tuple[Position, ...]:
        return self._state.found_footprints

    def get_footprint_markers(self) -> dict[Position, FootprintMarker]:
        return self._state.footprint_markers()

    def get_last_action_result(self) -> ActionResult | None:
        return self._last_result

    def get_winner(self) -> Winner | None:
        return self._state.winner

    def view(self) -> GameView:
        """Snapshot of everything the display may show right now."""
        message = self._last_result.message if self._last_result else ""
        return GameView.from_state(self._state, last_message=message)

    # -- Internals -------------------------------------------------------

    def _apply(self, handler: Callable[..., tuple[GameState, ActionResult]], *args: Any) -> ActionResult:
        new_state, result = handler(self._state, *args)
        self._state = new_state
        return self._record(result)

    def _record(self, result: ActionResult) -> ActionResult:
        """Store, log and broadcast an action result."""
        self._last_result = result
        role = result.role.value if isinstance(result.role, Role) else "-"
        if result.is_rejected:
            logger.info("Rejected %s from %s: %s", result.outcome.name, role, result.message)
        else:
            logger.info(
                "%s by %s (phase=%s, round=%d)",
                result.outcome.name, role, self._state.phase.value, self._state.turn_number,
            )
        self._notify(result)
        return result

    def _notify(self, result: ActionResult) -> None:
        data: dict[str, Any] = {
            "outcome": result.outcome.name,
            "message": result.message,
            "phase": self._state.phase.value,
            "turn_number": self._state.turn_number,
        }
        visible = self._state.visible_mouse_position
        if visible is not None:
            data["mouse_position"] = visible.as_tuple()
        if self._state.winner is not None:
            data["winner"] = self._state.winner.value
        if self._state.capturing_role is not None:
            data["capturing_role"] = self._state.capturing_role.value

        for event in events_for_result(result):
            payload = EventPayload(event=event, role=result.role, position=result.position, data=data)
            for listener in list(self._listeners):
                try:
                    listener(payload)
                except Exception:
                    logger.exception("Error in listener for event %s", event.name)

    def _game_over_result(self, role: Role | None = None) -> ActionResult:
        return ActionResult(
            outcome=Outcome.ACTION_OUT_OF_PHASE,
            role=role,
            message="The game is over. Reset to play again.",
        )

    def _phase_name(self) -> str:
        return self._state.phase.value.replace("_", " ")
