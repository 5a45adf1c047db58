"""
Rat and Warehouse Keepers - Game State

The authoritative record of a game in progress. GameState is immutable:
engines receive a state and return a new one, so a rejected action simply
hands back the state it was given.
"""

from dataclasses import dataclass, field, replace

from src.engine.base import (
    KEEPER_COUNT,
    TURN_ORDER,
    FootprintMarker,
    GameConfig,
    Phase,
    Position,
    Role,
    Winner,
)
from src.engine.board import Board


ORIGIN_PATH_INDEX = 0
FIFTH_STEP_PATH_INDEX = 4


@dataclass(frozen=True)
class GameState:
    """
    Complete state of one game.

    Attributes:
        config: Board size and round limit
        board: Generated warehouse layout
        phase: Current state machine phase
        turn_number: Current round (1..max_turns)
        active_role: Role entitled to act; None between rounds and after the end
        placement_index: How many pieces have been placed during setup
        mouse_position: Where the Mouse is, once placed
        mouse_path: Every cell the Mouse has occupied, placement first
        keeper_positions: Position per keeper slot, None until placed
        found_footprints: Cells where keepers detected a trace, in discovery order
        setup_complete: Whether the first round has been started
        winner: Winning side once the game has ended
        capturing_role: Keeper that caught the Mouse, if any
    """
    config: GameConfig
    board: Board
    phase: Phase = Phase.SETUP
    turn_number: int = 1
    active_role: Role | None = Role.MOUSE
    placement_index: int = 0
    mouse_position: Position | None = None
    mouse_path: tuple[Position, ...] = field(default_factory=tuple)
    keeper_positions: tuple[Position | None, ...] = (None,) * KEEPER_COUNT
    found_footprints: tuple[Position, ...] = field(default_factory=tuple)
    setup_complete: bool = False
    winner: Winner | None = None
    capturing_role: Role | None = None

    @classmethod
    def new(cls, config: GameConfig | None = None) -> "GameState":
        """Create a fresh game in the setup phase."""
        config = config or GameConfig()
        return cls(config=config, board=Board.generate(config.board_size))

    # -- Setup ------------------------------------------------------------

    @property
    def placer(self) -> Role | None:
        """Role still to be placed, or None once setup is over."""
        if self.phase is not Phase.SETUP or self.placement_index >= len(TURN_ORDER):
            return None
        return TURN_ORDER[self.placement_index]

    # -- Pieces -----------------------------------------------------------

    def keeper_position(self, role: Role) -> Position | None:
        if not role.is_keeper:
            raise ValueError(f"{role.label} is not a keeper")
        return self.keeper_positions[role.keeper_index]

    def keeper_at(self, pos: Position) -> Role | None:
        """Return the keeper standing on pos, if any."""
        for index, keeper_pos in enumerate(self.keeper_positions):
            if keeper_pos == pos:
                return Role.keeper(index)
        return None

    def with_keeper_at(self, role: Role, pos: Position) -> "GameState":
        positions = list(self.keeper_positions)
        positions[role.keeper_index] = pos
        return replace(self, keeper_positions=tuple(positions))

    def with_mouse_at(self, pos: Position) -> "GameState":
        return replace(self, mouse_position=pos, mouse_path=self.mouse_path + (pos,))

    def has_visited(self, pos: Position) -> bool:
        return pos in self.mouse_path

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.ENDED

    # -- Presentation-facing queries --------------------------------------

    @property
    def is_mouse_visible(self) -> bool:
        """
        Whether the Mouse's true position may be shown.

        Only the Mouse's own turn, the Mouse's own placement and the end of
        the game reveal it; keepers learn nothing beyond what checks report.
        """
        if self.phase is Phase.PLAYING:
            return self.active_role is Role.MOUSE
        if self.phase is Phase.SETUP:
            return self.placer is Role.MOUSE
        return self.phase is Phase.ENDED

    @property
    def visible_mouse_position(self) -> Position | None:
        return self.mouse_position if self.is_mouse_visible else None

    def footprint_markers(self) -> dict[Position, FootprintMarker]:
        """Classify each discovered footprint by where it sits on the Mouse's path."""
        markers = {}
        for pos in self.found_footprints:
            index = self.mouse_path.index(pos)
            if index == ORIGIN_PATH_INDEX:
                markers[pos] = FootprintMarker.ORIGIN
            elif index == FIFTH_STEP_PATH_INDEX:
                markers[pos] = FootprintMarker.FIFTH_STEP
            else:
                markers[pos] = FootprintMarker.TRACE
        return markers
