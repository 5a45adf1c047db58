"""
Rat and Warehouse Keepers - Presentation Snapshot Models

Pydantic models handed to the presentation layer. They carry only what
the visibility rule allows the display to show.
"""

from pydantic import BaseModel, Field

from src.engine.state import GameState


class FootprintView(BaseModel):
    """A discovered footprint and how to highlight it."""

    x: int
    y: int
    marker: str

    model_config = {"frozen": True}


class GameView(BaseModel):
    """Read-only snapshot of a game for rendering."""

    phase: str
    turn_number: int
    max_turns: int
    board_size: int
    board: list[list[str]]
    active_role: str | None = None
    placer: str | None = None
    mouse_position: tuple[int, int] | None = None
    keeper_positions: list[tuple[int, int] | None] = Field(default_factory=list)
    footprints: list[FootprintView] = Field(default_factory=list)
    winner: str | None = None
    capturing_role: str | None = None
    last_message: str = ""

    model_config = {"frozen": True}

    @classmethod
    def from_state(cls, state: GameState, last_message: str = "") -> "GameView":
        """Build a snapshot, hiding the Mouse unless it may be shown."""
        visible = state.visible_mouse_position
        markers = state.footprint_markers()
        return cls(
            phase=state.phase.value,
            turn_number=state.turn_number,
            max_turns=state.config.max_turns,
            board_size=state.board.size,
            board=[[cell.value for cell in row] for row in state.board.cells],
            active_role=state.active_role.value if state.active_role else None,
            placer=state.placer.value if state.placer else None,
            mouse_position=visible.as_tuple() if visible else None,
            keeper_positions=[
                pos.as_tuple() if pos else None for pos in state.keeper_positions
            ],
            footprints=[
                FootprintView(x=pos.x, y=pos.y, marker=markers[pos].name.lower())
                for pos in state.found_footprints
            ],
            winner=state.winner.value if state.winner else None,
            capturing_role=state.capturing_role.value if state.capturing_role else None,
            last_message=last_message,
        )
