"""
Rat and Warehouse Keepers - Turn Engine

In-game rules:
- Each round the Mouse acts first, then Keeper 1, 2 and 3
- The Mouse hops two cells along a row or column into a storage cell
  it has never occupied before
- A keeper either moves (road target) two cells along a row or column to a
  free intersection, or checks (storage target) a diagonally adjacent cell
- Checking the Mouse's cell ends the game; checking a cell on its path
  reveals a footprint
- The Mouse wins by surviving max_turns rounds

All methods are stateless class methods operating on immutable data.
"""

from dataclasses import replace

from src.engine.base import (
    TURN_ORDER,
    ActionResult,
    Outcome,
    Phase,
    Position,
    Role,
    Winner,
)
from src.engine.board import is_diagonal_neighbor, is_orthogonal_hop
from src.engine.state import GameState


class TurnEngine:
    """
    Stateless engine for rounds of play.

    State is passed in and returned, never stored.
    """

    @classmethod
    def submit(cls, state: GameState, dest: Position) -> tuple[GameState, ActionResult]:
        """Route a coordinate to the active role's action."""
        if state.phase is not Phase.PLAYING or state.active_role is None:
            return state, cls._out_of_phase(state, dest)
        if state.active_role is Role.MOUSE:
            return cls.move_mouse(state, dest)
        return cls.keeper_action(state, dest)

    # -- Mouse ------------------------------------------------------------

    @classmethod
    def move_mouse(cls, state: GameState, dest: Position) -> tuple[GameState, ActionResult]:
        """
        Move the Mouse to dest.

        Validation order: board bounds, cell kind, hop distance, path revisit.

        Returns:
            Tuple of (new_state, result). On rejection new_state is state.
        """
        role = Role.MOUSE
        if state.phase is not Phase.PLAYING or state.active_role is not role:
            return state, cls._out_of_phase(state, dest)

        if not state.board.contains(dest):
            return state, cls._reject(Outcome.OUT_OF_BOUNDS, role, dest, f"{dest} is off the board.")

        if not state.board.is_storage(dest):
            return state, cls._reject(
                Outcome.NOT_STORAGE, role, dest, "The Mouse can only move into storage cells."
            )

        if not is_orthogonal_hop(state.mouse_position, dest):
            return state, cls._reject(
                Outcome.ILLEGAL_DISTANCE, role, dest,
                "The Mouse must move to the next storage cell along a row or column.",
            )

        if state.has_visited(dest):
            return state, cls._reject(
                Outcome.PATH_REVISIT, role, dest, "The Mouse cannot return to a cell it has visited."
            )

        moved = state.with_mouse_at(dest)
        return cls._advance_turn(moved, ActionResult(
            outcome=Outcome.MOVED,
            role=role,
            message="The Mouse moved.",
        ))

    # -- Keepers ----------------------------------------------------------

    @classmethod
    def keeper_action(cls, state: GameState, dest: Position) -> tuple[GameState, ActionResult]:
        """
        Perform the active keeper's move or check.

        A road target is a move; a storage target is a check.

        Returns:
            Tuple of (new_state, result). On rejection new_state is state.
        """
        role = state.active_role
        if state.phase is not Phase.PLAYING or role is None or not role.is_keeper:
            return state, cls._out_of_phase(state, dest)

        if not state.board.contains(dest):
            return state, cls._reject(Outcome.OUT_OF_BOUNDS, role, dest, f"{dest} is off the board.")

        if state.board.is_road(dest):
            return cls._move_keeper(state, role, dest)
        return cls._check_cell(state, role, dest)

    @classmethod
    def _move_keeper(
        cls,
        state: GameState,
        role: Role,
        dest: Position,
    ) -> tuple[GameState, ActionResult]:
        if not state.board.is_intersection(dest):
            return state, cls._reject(
                Outcome.NOT_INTERSECTION, role, dest, "Keepers can only move to road intersections."
            )

        if not is_orthogonal_hop(state.keeper_position(role), dest):
            return state, cls._reject(
                Outcome.ILLEGAL_DISTANCE, role, dest,
                "Keepers must move to the next intersection along a row or column.",
            )

        if state.keeper_at(dest) is not None:
            return state, cls._reject(
                Outcome.POSITION_OCCUPIED, role, dest, "Another keeper is already there."
            )

        moved = state.with_keeper_at(role, dest)
        return cls._advance_turn(moved, ActionResult(
            outcome=Outcome.MOVED,
            role=role,
            position=dest,
            message=f"{role.label} moved.",
        ))

    @classmethod
    def _check_cell(
        cls,
        state: GameState,
        role: Role,
        dest: Position,
    ) -> tuple[GameState, ActionResult]:
        if not is_diagonal_neighbor(state.keeper_position(role), dest):
            return state, cls._reject(
                Outcome.ILLEGAL_DISTANCE, role, dest,
                "Keepers can only check storage cells diagonally adjacent to them.",
            )

        if dest == state.mouse_position:
            ended = replace(
                state,
                phase=Phase.ENDED,
                active_role=None,
                winner=Winner.KEEPERS,
                capturing_role=role,
            )
            return ended, ActionResult(
                outcome=Outcome.CAPTURED,
                role=role,
                position=dest,
                message=f"{role.label} found the Mouse! The keepers win!",
            )

        if state.has_visited(dest):
            # Repeat detections are still reported; the set itself stays unique.
            if dest not in state.found_footprints:
                state = replace(state, found_footprints=state.found_footprints + (dest,))
            return cls._advance_turn(state, ActionResult(
                outcome=Outcome.CHECKED_FOOTPRINT,
                role=role,
                position=dest,
                message="Found a trace of the Mouse!",
            ))

        return cls._advance_turn(state, ActionResult(
            outcome=Outcome.CHECKED_EMPTY,
            role=role,
            position=dest,
            message="Nothing here.",
        ))

    # -- Rounds -----------------------------------------------------------

    @classmethod
    def start_next_round(cls, state: GameState) -> tuple[GameState, ActionResult]:
        """
        Leave the between-rounds pause.

        The first call after setup starts round 1. Later calls advance the
        round counter, or end the game with a Mouse victory once the final
        round has been played.

        Returns:
            Tuple of (new_state, result). On rejection new_state is state.
        """
        if state.phase is not Phase.ROUND_TRANSITION:
            return state, ActionResult(
                outcome=Outcome.ACTION_OUT_OF_PHASE,
                message="A new round can only be started between rounds.",
            )

        if not state.setup_complete:
            started = replace(
                state,
                phase=Phase.PLAYING,
                active_role=Role.MOUSE,
                setup_complete=True,
            )
            return started, ActionResult(
                outcome=Outcome.ROUND_STARTED,
                role=Role.MOUSE,
                message=f"Round {started.turn_number} begins. Mouse, make your move.",
            )

        if state.turn_number + 1 > state.config.max_turns:
            ended = replace(state, phase=Phase.ENDED, active_role=None, winner=Winner.MOUSE)
            return ended, ActionResult(
                outcome=Outcome.GAME_ENDED,
                message=f"The keepers did not find the Mouse in {state.config.max_turns} rounds. The Mouse wins!",
            )

        started = replace(
            state,
            phase=Phase.PLAYING,
            active_role=Role.MOUSE,
            turn_number=state.turn_number + 1,
        )
        return started, ActionResult(
            outcome=Outcome.ROUND_STARTED,
            role=Role.MOUSE,
            message=f"Round {started.turn_number} begins. Mouse, make your move.",
        )

    @classmethod
    def _advance_turn(cls, state: GameState, result: ActionResult) -> tuple[GameState, ActionResult]:
        """Hand the turn to the next role, or pause after the last keeper."""
        role = state.active_role
        if role is TURN_ORDER[-1]:
            paused = replace(state, phase=Phase.ROUND_TRANSITION, active_role=None)
            return paused, replace(result, round_ended=True)

        next_role = TURN_ORDER[TURN_ORDER.index(role) + 1]
        return replace(state, active_role=next_role), result

    # -- Helpers ----------------------------------------------------------

    @staticmethod
    def _reject(outcome: Outcome, role: Role, pos: Position, message: str) -> ActionResult:
        return ActionResult(outcome=outcome, role=role, position=pos, message=message)

    @staticmethod
    def _out_of_phase(state: GameState, pos: Position) -> ActionResult:
        if state.phase is Phase.PLAYING and state.active_role is not None:
            message = f"It is {state.active_role.label}'s turn."
        else:
            message = f"No move can be made during the {state.phase.value.replace('_', ' ')} phase."
        return ActionResult(
            outcome=Outcome.ACTION_OUT_OF_PHASE,
            role=state.active_role,
            position=pos,
            message=message,
        )
