"""
Rat and Warehouse Keepers - Placement Engine

Setup phase rules:
- Pieces are placed in turn order: Mouse, Keeper 1, Keeper 2, Keeper 3
- The Mouse must start on a storage cell
- Each keeper must start on a free road intersection
- Placements cannot be undone; once all four are down the game waits
  for the first round to be started

All methods are stateless class methods operating on immutable data.
"""

from dataclasses import replace

from src.engine.base import TURN_ORDER, ActionResult, Outcome, Phase, Position, Role
from src.engine.state import GameState


class PlacementEngine:
    """
    Stateless engine for the setup phase.

    State is passed in and returned, never stored.
    """

    @classmethod
    def place_at(cls, state: GameState, pos: Position) -> tuple[GameState, ActionResult]:
        """
        Place the current placer's piece on pos.

        Args:
            state: Current game state
            pos: Target cell

        Returns:
            Tuple of (new_state, result). On rejection new_state is state.
        """
        role = state.placer
        if role is None:
            return state, ActionResult(
                outcome=Outcome.ACTION_OUT_OF_PHASE,
                position=pos,
                message="Pieces can only be placed during setup.",
            )

        if not state.board.contains(pos):
            return state, ActionResult(
                outcome=Outcome.OUT_OF_BOUNDS,
                role=role,
                position=pos,
                message=f"{pos} is off the board.",
            )

        if role is Role.MOUSE:
            if not state.board.is_storage(pos):
                return state, ActionResult(
                    outcome=Outcome.INVALID_PLACEMENT,
                    role=role,
                    position=pos,
                    message="The Mouse can only be placed in a storage cell.",
                )
            placed = state.with_mouse_at(pos)
        else:
            if not state.board.is_intersection(pos):
                return state, ActionResult(
                    outcome=Outcome.INVALID_PLACEMENT,
                    role=role,
                    position=pos,
                    message="Keepers can only be placed on road intersections.",
                )
            if state.keeper_at(pos) is not None:
                return state, ActionResult(
                    outcome=Outcome.POSITION_OCCUPIED,
                    role=role,
                    position=pos,
                    message="Another keeper is already there.",
                )
            placed = state.with_keeper_at(role, pos)

        return cls._advance_placement(placed, role, pos)

    @classmethod
    def _advance_placement(
        cls,
        state: GameState,
        role: Role,
        pos: Position,
    ) -> tuple[GameState, ActionResult]:
        """Move on to the next placer, or close setup after the last one."""
        # The Mouse's cell is never echoed back once it is placed.
        shown = pos if role.is_keeper else None
        next_index = state.placement_index + 1

        if next_index >= len(TURN_ORDER):
            new_state = replace(
                state,
                placement_index=next_index,
                phase=Phase.ROUND_TRANSITION,
                active_role=None,
            )
            return new_state, ActionResult(
                outcome=Outcome.PLACEMENT_COMPLETE,
                role=role,
                position=shown,
                message="All pieces placed. Start the game.",
            )

        next_role = TURN_ORDER[next_index]
        new_state = replace(state, placement_index=next_index, active_role=next_role)
        return new_state, ActionResult(
            outcome=Outcome.PLACED,
            role=role,
            position=shown,
            message=f"{role.label} placed. {next_role.label}, choose a starting cell.",
        )
